"""Table Rendering Pipeline - Main orchestrator.

Transforms a chat message containing markdown tables through 4 stages:
1. TSV normaliser - pasted spreadsheet blocks become pipe tables
2. Parser - locate table regions
3. Formatter - render each region in the selected style
4. Reassembly - splice rendered tables back in place of their source lines
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from logger import logger
from .formatters.card import table_to_card, table_to_svg
from .formatters.text_table import GLYPH_SETS, table_to_code_block
from .i18n import DEFAULT_LANGUAGE
from .parser import TableRegion, scan_tables
from .tsv import normalize_tsv


STYLES = ('unicode', 'ascii', 'cards')
DEFAULT_STYLE = 'unicode'

EXCESS_NEWLINES = re.compile(r'\n{3,}')


@dataclass
class ProcessedMessage:
    """Result of running a message through the pipeline."""
    content: str
    changed: bool = False
    table_count: int = 0
    style: str = DEFAULT_STYLE
    suppress_embeds: bool = False

    # SVG documents for card tables when images are detached, in table order
    images: list[str] = field(default_factory=list)


@dataclass
class PipelineContext:
    """Rendering options resolved by the caller."""
    style: str = DEFAULT_STYLE
    show_links: bool = True
    language: str = DEFAULT_LANGUAGE
    disable_link_previews: bool = True
    detach_images: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> 'PipelineContext':
        style = data.get('style') or DEFAULT_STYLE
        if style not in STYLES:
            logger.debug(f"Unknown table style {style!r}, using {DEFAULT_STYLE}")
            style = DEFAULT_STYLE
        return cls(
            style=style,
            show_links=data.get('show_links', True) is not False,
            language=data.get('language') or DEFAULT_LANGUAGE,
            disable_link_previews=data.get('disable_link_previews', True) is not False,
            detach_images=bool(data.get('detach_images')),
        )


def might_contain_table(text: str) -> bool:
    """Cheap check before running the full pipeline."""
    if not text or '\n' not in text:
        return False
    return '|' in text or '\t' in text


def render_region(table: TableRegion, ctx: PipelineContext) -> str:
    """Render one table in the context's style."""
    if ctx.style == 'cards':
        return table_to_card(
            table,
            show_links=ctx.show_links,
            language=ctx.language,
            include_image=not ctx.detach_images,
        )
    return table_to_code_block(table, GLYPH_SETS[ctx.style], show_links=ctx.show_links)


def process(
    text: str,
    context: Optional[dict] = None
) -> ProcessedMessage:
    """Process a message through the full pipeline.

    Args:
        text: Raw message body
        context: Optional dict with style, show_links, language,
            disable_link_previews, detach_images

    Returns:
        ProcessedMessage. When no table is found the content is the
        original text, untouched. With detach_images set, card tables leave
        only their link text in the content and their SVGs go to images.
    """
    if not text:
        return ProcessedMessage(content=text or '')

    ctx = PipelineContext.from_dict(context or {})
    raw_length = len(text)

    # Stage 1: TSV
    normalized = normalize_tsv(text) if '\t' in text else text

    # Stage 2: Parse
    regions = scan_tables(normalized)
    if not regions:
        return ProcessedMessage(content=text, style=ctx.style)

    # Stage 3 + 4: Render and splice by line range
    lines = normalized.split('\n')
    output = []
    images = []
    cursor = 0
    for region in regions:
        output.extend(lines[cursor:region.start_line])
        rendered = render_region(region, ctx)
        if ctx.style == 'cards' and ctx.detach_images:
            images.append(table_to_svg(region))
        logger.debug(
            f"Rendered {region.col_count}x{region.row_count} table "
            f"(lines {region.start_line}-{region.end_line - 1}) as {ctx.style}"
        )
        output.append(rendered)
        cursor = region.end_line
    output.extend(lines[cursor:])

    content = EXCESS_NEWLINES.sub('\n\n', '\n'.join(output)).strip()

    logger.info(f"Rendered {len(regions)} table(s) as {ctx.style} ({raw_length} -> {len(content)} chars)")

    return ProcessedMessage(
        content=content,
        changed=True,
        table_count=len(regions),
        style=ctx.style,
        suppress_embeds=ctx.disable_link_previews,
        images=images,
    )

