"""Table Rendering Pipeline.

Finds markdown (and pasted TSV) tables in a chat message and redraws them in
a form Discord can display:
1. TSV normaliser - tab blocks become pipe tables
2. Parser - locate table regions
3. Formatter - text art or SVG card
4. Reassembly - rendered tables replace their source lines
"""

from .pipeline import process, might_contain_table, ProcessedMessage
from .parser import scan_tables, TableRegion, Alignment
from .tsv import normalize_tsv, looks_like_tsv
from .chunker import chunk

__all__ = [
    'process',
    'might_contain_table',
    'ProcessedMessage',
    'scan_tables',
    'TableRegion',
    'Alignment',
    'normalize_tsv',
    'looks_like_tsv',
    'chunk',
]
