"""Testing helpers: Result assertions and the errno pytest plugin."""

from .asserts import assert_result_err, assert_result_ok, check_result_ok, expect_result_ok

__all__ = ["assert_result_err", "assert_result_ok", "check_result_ok", "expect_result_ok"]
