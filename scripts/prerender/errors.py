"""
Excepciones del módulo de pre-renderizado.

La política general es degradar en lugar de fallar: estas excepciones
solo se usan donde el llamador necesita distinguir el resultado.
"""


class PrerenderError(Exception):
    """Error base del módulo."""


class OptionParseError(PrerenderError):
    """Una fila de opciones no tiene las columnas esperadas."""

    def __init__(self, message: str, columns: int = 0):
        super().__init__(message)
        self.columns = columns


class PriceServiceUnavailable(PrerenderError):
    """El servicio remoto de precios no es alcanzable o respondió con error."""
