"""Documented example snippets and result models.

Por qué:
- Aquí viven los ejemplos con docstrings reST y los modelos puros (Pydantic v2).
- El dominio no conoce la CLI ni Rich: solo funciones y resultados.
"""
