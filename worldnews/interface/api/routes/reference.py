"""Reference data routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from worldnews.application.usecase.reference import (
    ListCategoriesResponse,
    ListCategoriesUseCase,
    ListCountriesResponse,
    ListCountriesUseCase,
)

router = APIRouter(tags=["reference"], route_class=DishkaRoute)


@router.get("/countries", response_model=ListCountriesResponse)
async def list_countries(
    list_countries_use_case: FromDishka[ListCountriesUseCase],
) -> ListCountriesResponse:
    """Countries a post can be tagged with, with names and flags."""
    return await list_countries_use_case.execute()


@router.get("/categories", response_model=ListCategoriesResponse)
async def list_categories(
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """Categories a post can be filed under."""
    return await list_categories_use_case.execute()
