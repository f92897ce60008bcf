"""Application service (use case) for invoice templates."""

from bookkeeper.application.interfaces import RecordRepository
from bookkeeper.application.schemas import TemplateCreate, TemplateUpdate
from bookkeeper.domain.entities import Template
from bookkeeper.domain.exceptions import EntityNotFoundError


class TemplateService:
    """Template CRUD. At most one template per user is the default."""

    def __init__(self, repository: RecordRepository[Template]):
        self._repository = repository

    def get_template(self, template_id: str) -> Template:
        template = self._repository.get_by_id(template_id)
        if template is None:
            raise EntityNotFoundError("Template", template_id)
        return template

    def list_templates(self, user_id: str) -> list[Template]:
        return self._repository.get_all(user_id)

    def get_default(self, user_id: str) -> Template | None:
        return next((t for t in self.list_templates(user_id) if t.is_default), None)

    def create_template(self, user_id: str, data: TemplateCreate) -> Template:
        template = self._repository.create(
            {"user_id": user_id, **data.model_dump(exclude={"is_default"})}
        )
        if data.is_default:
            template = self.set_default(template.id)
        return template

    def update_template(self, template_id: str, data: TemplateUpdate) -> Template:
        patch = data.model_dump(exclude_unset=True, exclude_none=True)
        updated = self._repository.update(template_id, patch)
        if updated is None:
            raise EntityNotFoundError("Template", template_id)
        return updated

    def set_default(self, template_id: str) -> Template:
        template = self.get_template(template_id)
        for other in self.list_templates(template.user_id):
            if other.is_default and other.id != template_id:
                self._repository.update(other.id, {"is_default": False})
        updated = self._repository.update(template_id, {"is_default": True})
        if updated is None:
            raise EntityNotFoundError("Template", template_id)
        return updated

    def delete_template(self, template_id: str) -> bool:
        if not self._repository.delete(template_id):
            raise EntityNotFoundError("Template", template_id)
        return True
