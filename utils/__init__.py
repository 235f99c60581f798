"""
Utilitários do catálogo: logging, exportação e análise das demonstrações.
"""
