"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los ejemplos ejecutables.
- El servicio de showcase depende de la abstracción, no de la clase concreta.
"""
