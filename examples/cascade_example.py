#!/usr/bin/env python3
"""
Cascading Index Example

This example walks through the cascade-index package:
- Building a fractional cascading index over several sorted catalogs
- Querying the predecessor of a key in every catalog at once
- Comparing answers with independent binary searches
- Inspecting size statistics of the augmented levels
- Error handling for unsorted input

Run with: python examples/cascade_example.py
"""

import logging
import random

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from cascade_index import (
    BinarySearchIndex,
    CascadeConfig,
    FractionalCascadingIndex,
    UnsortedCatalogError,
)

console = Console()


def print_header(title: str, subtitle: str = ""):
    """Print a header panel"""
    if subtitle:
        full_title = f"[bold blue]{title}[/bold blue]\n[dim]{subtitle}[/dim]"
    else:
        full_title = f"[bold blue]{title}[/bold blue]"

    console.print(Panel(
        full_title,
        style="bright_blue",
        box=box.DOUBLE,
        padding=(1, 2)
    ))


def print_step(step_num: int, title: str, description: str = ""):
    step_text = f"[bold yellow]Step {step_num}: {title}[/bold yellow]"
    if description:
        step_text += f"\n[dim italic]{description}[/dim italic]"
    console.print(step_text)
    console.print()


def print_success(message: str):
    console.print(f"[bold green]✓[/bold green] {message}")


def print_error(message: str):
    console.print(f"[bold red]✗[/bold red] {message}")


def demonstrate_query(catalogs):
    print_step(1, "Building and Querying",
               "One binary search in the first level, one comparison per catalog after it")

    index = FractionalCascadingIndex(catalogs)

    table = Table(title="Predecessor of each key", box=box.ROUNDED)
    table.add_column("Key", style="cyan", justify="right")
    for number, catalog in enumerate(catalogs):
        table.add_column(f"Catalog {number}\n{catalog}", style="green")

    for key in (0, 1, 4, 6, 11):
        values = index.search_values(key)
        indices = index.search(key)
        table.add_row(str(key), *[
            "[dim]none[/dim]" if index_ is None else f"{value} @ {index_}"
            for value, index_ in zip(values, indices)
        ])

    console.print(table)
    console.print()
    return index


def demonstrate_differential():
    print_step(2, "Checking Against Binary Search",
               "Random catalogs, every key compared with an independent search")

    rng = random.Random(42)
    catalogs = [sorted(rng.randint(-100, 100) for _ in range(rng.randint(10, 200)))
                for _ in range(50)]

    cascading = FractionalCascadingIndex(catalogs, CascadeConfig(validate_structure=True))
    baseline = BinarySearchIndex(catalogs)

    keys = range(-120, 121)
    mismatches = [key for key in keys if cascading.search(key) != baseline.search(key)]
    if mismatches:
        print_error(f"{len(mismatches)} keys disagree, first: {mismatches[0]}")
    else:
        print_success(f"All {len(keys)} keys agree across {len(catalogs)} catalogs")
    console.print()
    return cascading


def demonstrate_stats(index):
    print_step(3, "Level Statistics", "Promoted nodes decay geometrically level by level")

    stats = index.get_stats()
    table = Table(title="Index Statistics", box=box.SIMPLE)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Catalogs", str(stats.num_levels))
    table.add_row("Catalog elements", str(stats.total_catalog_elements))
    table.add_row("Augmented nodes", str(stats.total_nodes))
    table.add_row("Synthetic nodes", str(stats.total_synthetic_nodes))
    table.add_row("Nodes per element", f"{stats.overhead_ratio:.2f}")
    table.add_row("Build time", f"{stats.build_time * 1000:.2f} ms")
    table.add_row("Size bound holds", "yes" if stats.satisfies_size_bound() else "no")

    console.print(table)
    console.print()


def demonstrate_errors():
    print_step(4, "Error Handling", "Order checks are opt-in through CascadeConfig")

    try:
        FractionalCascadingIndex([[1, 2, 3], [9, 4]], CascadeConfig(check_sorted=True))
    except UnsortedCatalogError as e:
        print_success(f"Rejected unsorted input: {e}")
    console.print()


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s",
                        handlers=[RichHandler(console=console, show_path=False)])

    print_header("cascade-index - Fractional Cascading Demonstration",
                 "Predecessor search in many sorted catalogs at once")
    console.print()

    demonstrate_query([[1, 3, 6, 10], [2, 4, 5, 7, 8, 9], [0, 6, 12]])
    index = demonstrate_differential()
    demonstrate_stats(index)
    demonstrate_errors()

    console.print(Rule("[dim]Done[/dim]"))


if __name__ == "__main__":
    main()
