# File: areawiz/utils/errors.py
# Project: AreaWiz
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Errores tipados del proyecto.
# Notes: MissingInput / InvalidInput son los únicos errores visibles para el usuario.
from __future__ import annotations


class AwError(Exception):
    """Error base del proyecto."""


class AwValidationError(AwError):
    """Error de validación (input del usuario)."""


class _FieldError(AwValidationError):
    def __init__(self, index: int, label: str = "", text: str = "") -> None:
        self.index = int(index)
        self.label = str(label or "")
        self.text = str(text or "")
        name = self.label or f"#{self.index}"
        super().__init__(self._describe(name))

    def _describe(self, name: str) -> str:  # pragma: no cover - sobrescrito
        return name


class MissingInputError(_FieldError):
    """Campo requerido vacío al momento de calcular."""

    def _describe(self, name: str) -> str:
        return f"campo vacío: {name}"


class InvalidInputError(_FieldError):
    """El texto de un campo no se puede interpretar como número."""

    def _describe(self, name: str) -> str:
        return f"valor no numérico en {name}: {self.text!r}"


class AreaArityError(AwError):
    """Cantidad de valores distinta a la que pide la fórmula (error de programación)."""


class UnknownShapeError(AwError):
    """La figura no tiene fórmula (p.ej. la pseudo-figura 'loading')."""
