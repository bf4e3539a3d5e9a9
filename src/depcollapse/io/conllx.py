"""CoNLL-X reader and writer.

One token per line, ten tab-separated fields:

    index  word  lemma  cpos  pos  feats  head  deprel  phead  pdeprel

A blank line ends a sentence. A head of 0 or a relation of ``null`` means
the token has no incoming edge. Only word, cpos, head and deprel are read.
Every edge is kept unless ``keep_punct`` is off, so a file reads back as written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from depcollapse.graph.relations import UnknownRelationError, get_relation
from depcollapse.graph.types import Edge, Node
from depcollapse.punctuation import accept_all, punctuation_reject_filter
from depcollapse.structure import GrammaticalStructure

logger = logging.getLogger(__name__)

FIELD_COUNT = 10
WORD_FIELD = 1
TAG_FIELD = 3
HEAD_FIELD = 6
RELATION_FIELD = 7
NO_RELATION = "null"


class ConllxFormatError(ValueError):
    """A line that cannot be read as a CoNLL-X token."""

    def __init__(self, message: str, line_number: int, source: str = "<input>") -> None:
        super().__init__(f"{source}, line {line_number}: {message}")
        self.line_number = line_number
        self.source = source


def _build_sentence(
    rows: Sequence[tuple[int, list[str]]],
    source: str,
    keep_punct: bool,
) -> GrammaticalStructure:
    nodes = [
        Node(id=i, index=i, word=fields[WORD_FIELD], tag=fields[TAG_FIELD])
        for i, (_, fields) in enumerate(rows, start=1)
    ]
    edges: list[Edge] = []
    for node, (line_number, fields) in zip(nodes, rows):
        head_text, relation_name = fields[HEAD_FIELD], fields[RELATION_FIELD]
        try:
            head = int(head_text)
        except ValueError:
            raise ConllxFormatError(f"head {head_text!r} is not an integer", line_number, source) from None
        if head == 0 or relation_name == NO_RELATION:
            continue
        if not 1 <= head <= len(nodes):
            raise ConllxFormatError(
                f"head {head} outside sentence of {len(nodes)} tokens", line_number, source
            )
        try:
            relation = get_relation(relation_name)
        except UnknownRelationError:
            raise UnknownRelationError(
                f"{relation_name} ({source}, line {line_number}, node {node})"
            ) from None
        edges.append(Edge(nodes[head - 1], node, relation))

    punct_filter = accept_all if keep_punct else punctuation_reject_filter
    return GrammaticalStructure(nodes, edges, punct_filter)


def parse_conllx(
    lines: Iterable[str],
    *,
    source: str = "<input>",
    keep_punct: bool = True,
    skip_bad_sentences: bool = False,
) -> Iterator[GrammaticalStructure]:
    """Yield one structure per sentence.

    Raises:
        ConllxFormatError: On a line without exactly ten fields, or a bad
            head. Reading stops at that line.
        UnknownRelationError: On a relation outside the catalog, unless
            ``skip_bad_sentences`` is set, in which case the sentence is
            logged and skipped.
    """
    rows: list[tuple[int, list[str]]] = []
    skipped = 0

    def flush() -> GrammaticalStructure | None:
        nonlocal skipped
        try:
            return _build_sentence(rows, source, keep_punct)
        except UnknownRelationError as e:
            if not skip_bad_sentences:
                raise
            skipped += 1
            logger.warning("Skipping sentence: unknown relation %s", e.args[0])
            return None

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if line:
            fields = line.split("\t")
            if len(fields) != FIELD_COUNT:
                raise ConllxFormatError(
                    f"{FIELD_COUNT} fields expected but {len(fields)} are present",
                    line_number,
                    source,
                )
            rows.append((line_number, fields))
            continue
        if not rows:
            continue
        structure = flush()
        rows = []
        if structure is not None:
            yield structure

    # last sentence without a trailing blank line
    if rows:
        structure = flush()
        if structure is not None:
            yield structure

    if skipped:
        logger.info("Skipped %d sentence(s) in %s", skipped, source)


def read_conllx(
    path: str | Path,
    *,
    keep_punct: bool = True,
    skip_bad_sentences: bool = False,
) -> list[GrammaticalStructure]:
    """Read every sentence of a CoNLL-X file."""
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        structures = list(
            parse_conllx(
                f,
                source=str(path),
                keep_punct=keep_punct,
                skip_bad_sentences=skip_bad_sentences,
            )
        )
    logger.debug("Read %d sentence(s) from %s", len(structures), path)
    return structures


def format_conllx(structure: GrammaticalStructure, edges: Iterable[Edge]) -> str:
    """Render ``edges`` over the tokens of ``structure``, blank line included.

    Each token gets the governor and relation of its incoming edge; when a
    view gives a token several, the last one in ``edges`` is shown. Tokens
    without one get ``0`` and ``null``.
    """
    heads: dict[int, tuple[int, str]] = {}
    for edge in edges:
        heads[edge.dependent.index] = (edge.governor.index, str(edge.relation))

    lines = []
    for node in structure.tokens:
        gov, relation = heads.get(node.index, (0, NO_RELATION))
        lines.append(
            f"{node.index}\t{node.word}\t_\t{node.tag}\t{node.tag}\t_\t{gov}\t{relation}\t_\t_"
        )
    return "\n".join(lines) + "\n\n"
