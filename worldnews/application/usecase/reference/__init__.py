"""Reference data use cases."""

from .list_reference_data import (
    ListCategoriesResponse,
    ListCategoriesUseCase,
    ListCountriesResponse,
    ListCountriesUseCase,
)

__all__ = [
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
    "ListCountriesResponse",
    "ListCountriesUseCase",
]
