"""Print typed dependencies for a CoNLL-X treebank.

Usage:
    depcollapse treebank.conll
    depcollapse treebank.conll --basic --collapsed --conllx
    depcollapse treebank.conll --test

Defaults come from the DEPCOLLAPSE_* environment variables (see
depcollapse.config); flags override them.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from depcollapse.config import CollapseConfig, View, config_from_env
from depcollapse.graph.connectivity import check_connectivity
from depcollapse.graph.relations import UnknownRelationError
from depcollapse.io.conllx import ConllxFormatError, format_conllx, read_conllx
from depcollapse.io.render import format_plain
from depcollapse.shared.logger import RunLogger, remove_stdlib_bridge, stdlib_level
from depcollapse.structure import GrammaticalStructure

# output order when several views are asked for
_VIEW_ORDER = (View.BASIC, View.COLLAPSED, View.CC_PROCESSED, View.COLLAPSED_TREE)


def _format(structure: GrammaticalStructure, view: View, config: CollapseConfig) -> str:
    edges = structure.dependencies(view)
    if config.output_format == "conllx":
        return format_conllx(structure, edges)
    return format_plain(edges)


def _header(title: str) -> str:
    return f"{'-' * 13} {title} {'-' * 13}"


def _print_test(structure: GrammaticalStructure) -> None:
    click.echo(_header("tokens"))
    click.echo(str(structure))
    for view in (View.BASIC, View.COLLAPSED, View.COLLAPSED_TREE, View.CC_PROCESSED):
        click.echo(_header(view.heading))
        click.echo(format_plain(structure.dependencies(view)), nl=False)
    click.echo("-" * 47)
    report = structure.connectivity(View.COLLAPSED)
    click.echo(f"collapsed dependencies form a connected graph: {report.connected}")
    if not report.connected:
        click.echo(f"possible offending nodes: {sorted(report.roots)}")


def _print_views(
    structure: GrammaticalStructure,
    views: list[View],
    config: CollapseConfig,
    log: RunLogger,
) -> None:
    if config.check_connected:
        report = check_connectivity(structure.dependencies(View.CC_PROCESSED))
        if not report.connected:
            log.warn(f"Graph is not connected for: {structure}")
            log.warn(f"possible offending nodes: {sorted(report.roots)}")

    if not views:
        click.echo(_format(structure, config.view, config), nl=False)
        return
    for view in views:
        if len(views) > 1:
            click.echo(_header(view.heading))
        click.echo(_format(structure, view, config), nl=False)


@click.command()
@click.argument("conllx_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--basic", is_flag=True, help="Print basic dependencies")
@click.option("--collapsed", is_flag=True, help="Print collapsed dependencies")
@click.option("--cc-processed", is_flag=True, help="Print CC-processed dependencies")
@click.option("--collapsed-tree", is_flag=True, help="Print collapsed tree dependencies")
@click.option("--conllx", is_flag=True, help="Output CoNLL-X lines instead of relation(gov, dep)")
@click.option("--drop-punct", is_flag=True, help="Drop edges to punctuation tokens")
@click.option("--check-connected", is_flag=True, help="Warn when the CC-processed graph is disconnected")
@click.option("--skip-bad-sentences", is_flag=True, help="Skip sentences with unknown relations")
@click.option("--test", "test_mode", is_flag=True, help="Print every view and a connectivity check")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), help="Persist INFO+ log lines")
@click.option("--trace-file", type=click.Path(dir_okay=False, path_type=Path), help="Persist every log line, including pass dumps")
def main(
    conllx_file: Path,
    basic: bool,
    collapsed: bool,
    cc_processed: bool,
    collapsed_tree: bool,
    conllx: bool,
    drop_punct: bool,
    check_connected: bool,
    skip_bad_sentences: bool,
    test_mode: bool,
    log_file: Path | None,
    trace_file: Path | None,
) -> None:
    """Print typed dependencies for each sentence of a CoNLL-X file.

    CONLLX_FILE: Basic dependencies, one token per line.
    """
    try:
        config = config_from_env().override(
            output_format="conllx" if conllx else None,
            keep_punct=False if drop_punct else None,
            check_connected=check_connected or None,
            skip_bad_sentences=skip_bad_sentences or None,
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    selected = {
        View.BASIC: basic,
        View.COLLAPSED: collapsed,
        View.CC_PROCESSED: cc_processed,
        View.COLLAPSED_TREE: collapsed_tree,
    }
    views = [v for v in _VIEW_ORDER if selected[v]]

    log = RunLogger(log_file=log_file, trace_file=trace_file, min_level=config.log_level)
    bridge_level = stdlib_level("DEBUG" if trace_file else config.log_level)
    log.install_stdlib_bridge("depcollapse", level=bridge_level)

    try:
        with log.timer("load"):
            structures = read_conllx(
                conllx_file,
                keep_punct=config.keep_punct,
                skip_bad_sentences=config.skip_bad_sentences,
            )
        log.info(f"Loaded {len(structures)} sentence(s) from {conllx_file}")

        with log.timer("convert"):
            for structure in structures:
                if test_mode:
                    _print_test(structure)
                else:
                    _print_views(structure, views, config, log)
                log.count("sentences")
        log.summary()
    except ConllxFormatError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except UnknownRelationError as e:
        click.echo(f"Error: Unknown grammatical relation {e.args[0]}", err=True)
        sys.exit(1)
    finally:
        remove_stdlib_bridge("depcollapse")
        log.close()


if __name__ == "__main__":
    main()
