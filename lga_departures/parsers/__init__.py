from .tsv import TSVParser, ParsedTable

__all__ = ['TSVParser', 'ParsedTable']
