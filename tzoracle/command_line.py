import argparse
import importlib
import logging
from typing import Callable, List, Optional

from tzoracle.configs import DEFAULT_ERROR_BUDGET_PERCENT, DEFAULT_FUZZ_SAMPLES
from tzoracle.fuzz import FuzzConfig
from tzoracle.harness import Capabilities, ScenarioResult, run_suite, summarize

DEFAULT_REFERENCE = "tzoracle.adapters:reference_resolve"
DEFAULT_INHABITED = "tzoracle.adapters:is_on_land"


def load_callable(path: str) -> Callable:
    """
    :param path: "module.name:attribute", e.g. "tzoracle.adapters:reference_resolve"
    """
    module_name, _, attr_path = path.partition(":")
    if not module_name or not attr_path:
        raise ValueError(f"expected 'module:attribute', got '{path}'")
    obj = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)
    if not callable(obj):
        raise ValueError(f"'{path}' is not callable")
    return obj


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="validate a coordinate to timezone resolver"
    )
    parser.add_argument(
        "-r",
        "--resolver",
        required=True,
        help="the resolver under test as 'module:function'",
    )
    parser.add_argument(
        "--reference",
        default=DEFAULT_REFERENCE,
        help="the reference geocoder as 'module:function' (default: %(default)s)",
    )
    parser.add_argument(
        "--inhabited",
        default=DEFAULT_INHABITED,
        help="the inhabited land oracle as 'module:function' (default: %(default)s)",
    )
    parser.add_argument(
        "--no-reference",
        action="store_true",
        help="skip all comparisons with the reference geocoder",
    )
    parser.add_argument(
        "--no-fuzz", action="store_true", help="skip the statistical validation"
    )
    parser.add_argument(
        "-n",
        "--samples",
        type=int,
        default=DEFAULT_FUZZ_SAMPLES,
        help="amount of random samples (default: %(default)s)",
    )
    parser.add_argument(
        "-b",
        "--budget",
        type=int,
        default=DEFAULT_ERROR_BUDGET_PERCENT,
        help="accepted share of mismatches in percent (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "-p", "--profile", action="store_true", help="run the speed tests"
    )
    parser.add_argument("-v", action="store_true", help="verbosity flag")
    return parser


def print_results(results: List[ScenarioResult], verbose: bool = False) -> None:
    if verbose:
        for result in results:
            mark = "PASS" if result.passed else "FAIL"
            print(f"{mark} {result.name}")
        print()
    print(summarize(results))


def main(argv: Optional[List[str]] = None) -> int:
    parser = get_parser()
    parsed_args = parser.parse_args(argv)  # takes input from sys.argv if None
    verbose_mode = parsed_args.v
    logging.basicConfig(level=logging.DEBUG if verbose_mode else logging.WARNING)

    resolve = load_callable(parsed_args.resolver)
    reference = None
    is_inhabited = None
    if not parsed_args.no_reference:
        reference = load_callable(parsed_args.reference)
        if reference is resolve or parsed_args.reference == parsed_args.resolver:
            parser.error(
                "the reference geocoder must be independent of the resolver under test"
            )
        if not parsed_args.no_fuzz:
            is_inhabited = load_callable(parsed_args.inhabited)

    results = run_suite(
        resolve,
        reference=reference,
        is_inhabited=is_inhabited,
        capabilities=Capabilities.from_collaborators(reference, is_inhabited),
        fuzz_config=FuzzConfig(
            samples=parsed_args.samples,
            error_budget_percent=parsed_args.budget,
            seed=parsed_args.seed,
        ),
        profile=parsed_args.profile,
    )
    print_results(results, verbose=verbose_mode)
    return 0 if all(r.passed for r in results) else 1
