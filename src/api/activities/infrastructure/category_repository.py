"""SQLAlchemy implementation of ICategoryRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from activities.domain.entities import Category
from activities.domain.value_objects import CategoryId
from activities.infrastructure.models import CategoryModel
from activities.infrastructure.observability import (
    ActivityRepositoryProbe,
    DefaultActivityRepositoryProbe,
)
from activities.ports.repositories import ICategoryRepository


class CategoryRepository(ICategoryRepository):
    """Repository for activity categories.

    Works on a session owned by the unit of work and never commits.
    """

    def __init__(
        self,
        session: Session,
        probe: ActivityRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultActivityRepositoryProbe()

    def create(self, category: Category) -> None:
        self._session.add(
            CategoryModel(
                id=category.id.value,
                name=category.name,
                description=category.description,
            )
        )
        self._session.flush()

    def update(self, category: Category) -> bool:
        model = self._session.get(CategoryModel, category.id.value)
        if model is None:
            self._probe.entity_not_found("category", category.id.value)
            return False

        model.name = category.name
        model.description = category.description
        self._session.flush()
        return True

    def delete(self, category_id: CategoryId) -> bool:
        result = self._session.execute(
            delete(CategoryModel).where(CategoryModel.id == category_id.value)
        )
        return result.rowcount > 0

    def get_by_id(self, category_id: CategoryId) -> Category | None:
        stmt = select(CategoryModel).where(CategoryModel.id == category_id.value)
        model = self._session.execute(stmt).scalar_one_or_none()

        if model is None:
            self._probe.entity_not_found("category", category_id.value)
            return None
        return self._to_domain(model)

    def list_all(self) -> list[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.name, CategoryModel.id)
        return [self._to_domain(m) for m in self._session.execute(stmt).scalars()]

    @staticmethod
    def _to_domain(model: CategoryModel) -> Category:
        return Category(
            id=CategoryId(value=model.id),
            name=model.name,
            description=model.description,
        )
