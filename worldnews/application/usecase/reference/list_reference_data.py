"""Reference data use cases."""

from pydantic import BaseModel

from worldnews.domain.value import COUNTRIES, Category, CountryInfo


class ListCountriesResponse(BaseModel):
    """List countries response."""

    countries: list[CountryInfo]


class ListCategoriesResponse(BaseModel):
    """List categories response."""

    categories: list[Category]


class ListCountriesUseCase:
    """Use case for the country picker."""

    async def execute(self) -> ListCountriesResponse:
        return ListCountriesResponse(countries=list(COUNTRIES.values()))


class ListCategoriesUseCase:
    """Use case for the category picker."""

    async def execute(self) -> ListCategoriesResponse:
        return ListCategoriesResponse(categories=list(Category))
