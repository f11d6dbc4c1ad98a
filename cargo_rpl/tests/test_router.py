import pytest

from cargo_rpl.router import Route, RouteAction, normalize_lint_name, route


class TestRoute:
    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, flag):
        assert route(["cargo-rpl", "rpl", flag]).action is RouteAction.HELP

    @pytest.mark.parametrize("flag", ["-V", "--version"])
    def test_version(self, flag):
        assert route(["cargo-rpl", "rpl", flag]).action is RouteAction.VERSION

    def test_help_position_independent(self):
        args = ["cargo-rpl", "rpl", "--", "-D", "warnings", "--help"]
        assert route(args).action is RouteAction.HELP

    def test_help_when_run_directly(self):
        assert route(["cargo-rpl", "-h"]).action is RouteAction.HELP

    def test_help_wins_over_version(self):
        assert route(["cargo-rpl", "-V", "-h"]).action is RouteAction.HELP

    def test_version_wins_over_explain(self):
        assert route(["cargo-rpl", "--explain", "x", "-V"]).action is RouteAction.VERSION

    def test_explain_normalizes(self):
        result = route(["cargo-rpl", "rpl", "--explain", "Unsound_Slice_Cast"])
        assert result == Route(RouteAction.EXPLAIN, lint="unsound_slice_cast")
        assert result.is_early_exit

    def test_explain_without_lint_falls_back_to_help(self):
        result = route(["cargo-rpl", "rpl", "--explain"])
        assert result.action is RouteAction.HELP
        assert result.lint is None

    def test_explain_uses_first_occurrence(self):
        result = route(["cargo-rpl", "--explain", "A", "--explain", "B"])
        assert result.lint == "a"

    def test_invoke(self):
        result = route(["cargo-rpl", "rpl", "--fix"])
        assert result.action is RouteAction.INVOKE
        assert not result.is_early_exit

    def test_empty(self):
        assert route([]).action is RouteAction.INVOKE

    def test_short_flag_must_match_exactly(self):
        assert route(["cargo-rpl", "rpl", "-hv", "--helpful"]).action is RouteAction.INVOKE


class TestNormalizeLintName:
    def test_ascii(self):
        assert normalize_lint_name("RPL::Use_After_Free") == "rpl::use_after_free"

    def test_non_ascii_untouched(self):
        assert normalize_lint_name("ÄBC") == "Äbc"
