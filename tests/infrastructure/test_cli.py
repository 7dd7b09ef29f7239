"""Smoke tests for the click CLI."""

from click.testing import CliRunner

from orderpricing.infrastructure.cli.main import cli


def _run(*args: str):
    return CliRunner().invoke(cli, list(args))


class TestOrderPrice:

    def test_prints_totals(self):
        result = _run("order", "price", "--customer", "7", "--items", "P1:10@100.00")
        assert result.exit_code == 0, result.output
        assert "Subtotal" in result.output
        assert "$1000.00" in result.output
        assert "$100.00" in result.output
        assert "$900.00" in result.output

    def test_rejected_order(self):
        result = _run("order", "price", "--customer", "0", "--items", "P1:1@10.00")
        assert result.exit_code == 1
        assert "could not be processed" in result.output

    def test_malformed_items(self):
        result = _run("order", "price", "--customer", "7", "--items", "P1-3")
        assert result.exit_code == 2
        assert "Invalid item format" in result.output

    def test_uses_config_file(self, tmp_path):
        path = tmp_path / "discounts.toml"
        path.write_text(
            '[discounts]\nmax_discount_rate = "0.15"\n'
            'premium_customer_discount_rate = "0.25"\n',
            encoding="utf-8",
        )
        result = _run(
            "--config", str(path),
            "order", "price", "--customer", "100", "--items", "P1:1@1000.00",
        )
        assert result.exit_code == 0, result.output
        assert "$150.00" in result.output
        assert "$850.00" in result.output


class TestOrderValidate:

    def test_valid(self):
        result = _run("order", "validate", "--customer", "7", "--items", "P1:1@1.00")
        assert result.exit_code == 0
        assert "valid" in result.output

    def test_invalid(self):
        result = _run("order", "validate", "--customer", "7", "--items", "P1:1@-1.00")
        assert result.exit_code == 1
        assert "invalid" in result.output


class TestOrderBreakdown:

    def test_marks_capped_discount(self, tmp_path):
        path = tmp_path / "discounts.toml"
        path.write_text('[discounts]\nmax_discount_rate = "0.05"\n', encoding="utf-8")
        result = _run(
            "--config", str(path),
            "order", "breakdown", "--customer", "100", "--items", "P1:1@1000.00",
        )
        assert result.exit_code == 0, result.output
        assert "(capped)" in result.output
        assert "$950.00" in result.output

    def test_engine_error(self):
        result = _run("order", "breakdown", "--customer", "7", "--items", "P1:0@1.00")
        assert result.exit_code == 1
        assert "greater than zero" in result.output


class TestUserCommands:

    def test_check_email(self):
        assert _run("user", "check-email", "a@b.com").exit_code == 0
        assert _run("user", "check-email", "nope").exit_code == 1

    def test_check_username(self):
        assert _run("user", "check-username", "alice").exit_code == 0
        assert _run("user", "check-username", "al").exit_code == 1

    def test_create(self):
        result = _run("user", "create", "--username", " alice ", "--email", "a@b.com")
        assert result.exit_code == 0
        assert "User 'alice' <a@b.com> created (active)" in result.output

    def test_create_invalid(self):
        result = _run("user", "create", "--username", "al", "--email", "a@b.com")
        assert result.exit_code == 1


class TestConfigShow:

    def test_defaults(self):
        result = _run("config", "show")
        assert result.exit_code == 0
        assert "max_discount_rate" in result.output
        assert "0.30" in result.output

    def test_missing_file(self, tmp_path):
        result = _run("--config", str(tmp_path / "nope.toml"), "config", "show")
        assert result.exit_code == 1
        assert "not found" in result.output
