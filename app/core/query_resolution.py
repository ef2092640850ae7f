"""
Resolución de filtros de los listados.

Cada listado recibe filtros opcionales y ejecuta exactamente una consulta del
repositorio. La elección sigue un orden de prioridad fijo: gana la primera
regla que se cumpla.

Un filtro está presente si se envió y no es una cadena vacía.
"""
from typing import Any, NamedTuple, Optional, Tuple


class ResolvedQuery(NamedTuple):
    """Consulta elegida: nombre del método del repositorio y sus argumentos"""
    method: str
    args: Tuple[Any, ...] = ()

    def run(self, repo):
        return getattr(repo, self.method)(*self.args)


def is_present(value: Optional[str]) -> bool:
    return value is not None and value != ""


def resolve_product_listing(name: Optional[str] = None, category: Optional[str] = None) -> ResolvedQuery:
    """
    Prioridad:
    1. nombre y categoría
    2. solo nombre
    3. solo categoría
    4. ninguno: todos los activos

    El listado general nunca muestra productos inactivos.
    """
    if is_present(name) and is_present(category):
        return ResolvedQuery(
            "find_by_name_containing_ignore_case_and_category_and_active_true",
            (name, category)
        )
    if is_present(name):
        return ResolvedQuery("find_by_name_containing_ignore_case_and_active_true", (name,))
    if is_present(category):
        return ResolvedQuery("find_by_category_and_active_true", (category,))
    return ResolvedQuery("find_by_active_true")


def resolve_client_listing(locality: Optional[str] = None) -> ResolvedQuery:
    if is_present(locality):
        return ResolvedQuery("find_by_locality", (locality,))
    return ResolvedQuery("find_all")


def resolve_order_listing(client_name: Optional[str] = None, locality: Optional[str] = None) -> ResolvedQuery:
    """
    Prioridad:
    1. nombre de cliente y localidad
    2. solo nombre de cliente
    3. solo localidad
    4. ninguno: todos los pedidos

    Rango de fechas y total mínimo tienen endpoints propios.
    """
    if is_present(client_name) and is_present(locality):
        return ResolvedQuery(
            "find_by_client_name_containing_ignore_case_and_locality",
            (client_name, locality)
        )
    if is_present(client_name):
        return ResolvedQuery("find_by_client_name_containing_ignore_case", (client_name,))
    if is_present(locality):
        return ResolvedQuery("find_by_locality", (locality,))
    return ResolvedQuery("find_all")
