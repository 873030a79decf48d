"""End-to-end tests for the click CLI."""

from click.testing import CliRunner

from cupcake.infrastructure.cli.main import cli


def _run(*args):
    return CliRunner().invoke(cli, list(args))


class TestDatesCommand:

    def test_lists_four_days(self):
        result = _run("dates", "--today", "2024-01-02")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == [
            "Tue Jan 2  (same day, +Rp5,000.00)",
            "Wed Jan 3",
            "Thu Jan 4",
            "Fri Jan 5",
        ]

    def test_bad_date_format_rejected(self):
        result = _run("dates", "--today", "02/01/2024")
        assert result.exit_code == 2


class TestFlavorsCommand:

    def test_lists_menu(self):
        result = _run("flavors")
        assert result.exit_code == 0
        assert "Red Velvet" in result.output.splitlines()


class TestOrderCommand:

    def test_same_day_order(self):
        result = _run("order", "--quantity", "6", "--flavor", "vanilla", "--today", "2024-01-02")
        assert result.exit_code == 0
        assert "Vanilla" in result.output
        assert "Tue Jan 2  (same day)" in result.output
        assert "Rp215,000.00" in result.output

    def test_later_pickup_date(self):
        result = _run(
            "order", "--quantity", "6", "--flavor", "Coffee",
            "--date", "Wed Jan 3", "--today", "2024-01-02",
        )
        assert result.exit_code == 0
        assert "Rp210,000.00" in result.output
        assert "same day" not in result.output

    def test_date_not_offered_rejected(self):
        result = _run(
            "order", "--quantity", "1", "--date", "Sat Jan 6", "--today", "2024-01-02",
        )
        assert result.exit_code == 2
        assert "not a pickup option" in result.output

    def test_unknown_flavor_rejected(self):
        result = _run("order", "--quantity", "1", "--flavor", "Durian")
        assert result.exit_code == 2

    def test_submit_without_flavor_fails(self):
        result = _run("order", "--quantity", "2", "--submit", "--today", "2024-01-02")
        assert result.exit_code == 1
        assert "Choose a flavor" in result.output

    def test_submit(self):
        result = _run(
            "order", "--quantity", "2", "--flavor", "Chocolate",
            "--submit", "--today", "2024-01-02",
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Order submitted:",
            "Quantity: 2 cupcakes",
            "Flavor: Chocolate",
            "Pickup date: Tue Jan 2",
            "Total: Rp75,000.00",
            "",
            "Thank you!",
        ]

    def test_cancel(self):
        result = _run("order", "--quantity", "2", "--cancel", "--today", "2024-01-02")
        assert result.exit_code == 0
        assert result.output.rstrip().endswith("Order cancelled.")

    def test_submit_and_cancel_conflict(self):
        result = _run("order", "--quantity", "2", "--submit", "--cancel")
        assert result.exit_code == 2

    def test_show_changes_echoes_events(self):
        result = _run(
            "order", "--quantity", "6", "--date", "Wed Jan 3",
            "--today", "2024-01-02", "--show-changes",
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[:4] == [
            "  quantity -> 6",
            "  price -> Rp215,000.00",
            "  selected_date -> Wed Jan 3",
            "  price -> Rp210,000.00",
        ]


class TestGlobalOptions:

    def test_unavailable_locale_rejected(self):
        result = _run("--locale", "xx_NOT_A_LOCALE.UTF-8", "flavors")
        assert result.exit_code == 2
        assert "not available" in result.output
