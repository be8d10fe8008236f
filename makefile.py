#!/usr/bin/env python3
"""
makefile.py - Task runner for the cascade-index project.

Usage:
    python makefile.py <target>

Requires: Python 3.9+, pip install -e ".[test,dev]"
"""

import os
import shutil
import subprocess
import sys
from collections import defaultdict

from colorama import Fore, Style
from colorama import init as _colorama_init

_colorama_init(autoreset=True)


def print_header(title):
    bar = Fore.CYAN + Style.BRIGHT + "=" * 52 + Style.RESET_ALL
    label = Fore.CYAN + Style.BRIGHT + f"  {title}" + Style.RESET_ALL
    print(f"\n{bar}\n{label}\n{bar}")


def print_step(msg):
    print(f"{Fore.YELLOW}-->{Style.RESET_ALL} {msg}")


def print_success(msg):
    print(f"{Fore.GREEN}[OK]{Style.RESET_ALL} {msg}")


def print_warn(msg):
    print(f"{Fore.YELLOW}[WARN]{Style.RESET_ALL} {msg}")


def run_cmd(args, allow_failure=False):
    """
    Run a command as a subprocess, streaming output directly to the terminal.
    Exits with the subprocess exit code on failure unless allow_failure=True.
    """
    try:
        result = subprocess.run(args)
    except FileNotFoundError:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Command not found: '{args[0]}'")
        print(f"        Ensure '{args[0]}' is installed and on your PATH.")
        if not allow_failure:
            sys.exit(127)
        return 127
    if result.returncode != 0 and not allow_failure:
        sys.exit(result.returncode)
    return result.returncode


def target_test():
    print_header("Running All Tests")
    run_cmd([sys.executable, "-m", "pytest", "-v"])


def target_test_cascade():
    print_header("Running Cascading Index Tests")
    run_cmd([sys.executable, "-m", "pytest", "tests/test_cascade", "-v"])


def target_test_random():
    print_header("Running Randomized Differential Tests")
    run_cmd([sys.executable, "-m", "pytest", "tests/test_cascade/test_random_differential.py", "-v"])


def target_test_coverage():
    print_header("Running Tests with Coverage")
    run_cmd([sys.executable, "-m", "pytest", "--cov=cascade_index", "--cov-report=term-missing"])


def target_coverage_html():
    print_header("Generating HTML Coverage Report")
    run_cmd([sys.executable, "-m", "pytest", "--cov=cascade_index", "--cov-report=html"])
    print_success("Coverage report written to htmlcov/index.html")


def target_clean():
    print_header("Cleaning Caches")
    for path in (".pytest_cache", "htmlcov", ".coverage"):
        if not os.path.exists(path):
            continue
        try:
            if os.path.isdir(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
            print_step(f"Removed {path}")
        except OSError as exc:
            print_warn(f"Could not remove {path}: {exc}")
    for root, dirs, _ in os.walk("."):
        for name in dirs:
            if name == "__pycache__":
                shutil.rmtree(os.path.join(root, name), ignore_errors=True)
    print_success("Clean complete")


def target_example():
    print_header("Running Cascading Index Example")
    run_cmd([sys.executable, "examples/cascade_example.py"])


TARGETS = {
    "test": (target_test, "Run all tests", "Testing"),
    "test-cascade": (target_test_cascade, "Run cascading index tests only", "Testing"),
    "test-random": (target_test_random, "Run randomized differential tests", "Testing"),
    "test-coverage": (target_test_coverage, "Run tests with coverage", "Testing"),
    "coverage-html": (target_coverage_html, "Generate htmlcov/ report", "Testing"),
    "clean": (target_clean, "Remove test caches and coverage output", "Tools"),
    "example": (target_example, "Run examples/cascade_example.py", "Run"),
    "help": (None, "Show this help message", "Meta"),
}


def target_help():
    title = (
        Fore.CYAN
        + Style.BRIGHT
        + "cascade-index - Available Commands"
        + Style.RESET_ALL
    )
    print(f"\n{title}\n")
    groups = defaultdict(list)
    for name, (_, desc, group) in TARGETS.items():
        groups[group].append((name, desc))
    group_order = ["Testing", "Run", "Tools", "Meta"]
    for group in group_order:
        if group not in groups:
            continue
        header = Fore.YELLOW + Style.BRIGHT + f"{group}:" + Style.RESET_ALL
        print(header)
        for name, desc in groups[group]:
            padded = name.ljust(24)
            print(f"  {Fore.GREEN}{padded}{Style.RESET_ALL}  {desc}")
        print()


TARGETS["help"] = (target_help, "Show this help message", "Meta")


def main():
    if len(sys.argv) < 2:
        target_help()
        sys.exit(0)

    name = sys.argv[1]

    if name not in TARGETS:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Unknown target: '{name}'")
        print("  Run:  python makefile.py help  to list all available targets.")
        sys.exit(1)

    func, _, _ = TARGETS[name]
    func()


if __name__ == "__main__":
    main()
