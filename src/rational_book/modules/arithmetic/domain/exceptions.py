# src/rational_book/modules/arithmetic/domain/exceptions.py
"""
Excepciones del dominio de Aritmética.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la infraestructura.
"""


class RationalArithmeticError(Exception):
    """Clase base para errores en el módulo de aritmética."""

    pass


class InvalidArgument(RationalArithmeticError, ValueError):
    """
    Un argumento viola una precondición del dominio.

    Caso principal: denominador igual a cero, ya sea recibido directamente
    o calculado como producto de denominadores durante una suma.
    """

    pass
