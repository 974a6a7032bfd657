import argparse
import time

import requests
from colorama import Fore

import utils
from utils import log_with_time, log_error, vlog, format_flag
from builder import build_word_tree, load_word_list, TreeBuildError


def run_cli(argv=None):
    parser = argparse.ArgumentParser(description="Inspect the word tree built from a word list")
    parser.add_argument("source", help="Path or http(s) URL of a newline-separated word list")
    parser.add_argument("--words", action="store_true", help="Print every word in tree order")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 unless the tree is well-formed and suitable for iterative char search",
    )
    parser.add_argument("--timeout", type=float, default=utils.DEFAULT_TIMEOUT, help="Download timeout in seconds (default: %(default)s)")
    args = parser.parse_args(argv)

    utils.VERBOSE = args.verbose
    utils.start_time = time.time()

    try:
        words = load_word_list(args.source, timeout=args.timeout)
        root = build_word_tree(words)
    except (OSError, UnicodeDecodeError, requests.RequestException, TreeBuildError) as e:
        log_error(f"Could not build tree from {args.source}: {e}")
        return 2

    t0 = time.time()
    depth = root.get_max_depth()
    well_formed = root.is_fully_well_formed()
    suitable = root.is_suitable_for_iterative_char_search()
    vlog("Structural checks done", t0)

    log_with_time(f"Max depth: {depth}")
    log_with_time(f"Fully well-formed: {format_flag(well_formed)}")
    log_with_time(f"Suitable for iterative char search: {format_flag(suitable)}")

    if args.words:
        count = 0
        for word in root.words():
            print(word)
            count += 1
        log_with_time(f"✅ {count} words", color=Fore.GREEN)

    if args.strict and not (well_formed and suitable):
        log_error("Tree failed strict checks")
        return 1
    return 0
