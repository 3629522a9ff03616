from .categorizer import Categorizer, CategoryRule, CategoryRules
from .pdfprocessor import PDFProcessor, parse_statement_filename
from .pipeline import list_statement_files, run
from .rules import DEFAULT_RULES, load_rules
from .scanner import EntryReconstructor

__all__ = [
    'Categorizer',
    'CategoryRule',
    'CategoryRules',
    'DEFAULT_RULES',
    'EntryReconstructor',
    'PDFProcessor',
    'list_statement_files',
    'load_rules',
    'parse_statement_filename',
    'run',
]
