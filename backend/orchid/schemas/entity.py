"""Orchid Dashboard: declarative entity schema (EntityConfig and its parts)."""
from typing import Any, Callable, Literal

from pydantic import BaseModel, ConfigDict, Field

Endpoint = Literal["products", "users"]

ColumnType = Literal["text", "number", "date", "boolean", "badge", "avatar", "image"]
FieldType = Literal["text", "email", "number", "select", "textarea", "date", "file", "checkbox", "radio"]
ActionType = Literal["create", "edit", "delete", "view", "bulk-edit", "bulk-delete", "import", "export"]
Variant = Literal["primary", "secondary", "success", "danger", "warning", "info"]
FileFormat = Literal["csv", "xlsx", "json"]
SortDirection = Literal["asc", "desc"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Option(_Frozen):
    label: str
    value: Any


class ColumnConfig(_Frozen):
    """How a record attribute is shown in the list table."""

    key: str
    label: str
    type: ColumnType = "text"
    sortable: bool = False
    searchable: bool = False
    width: str | None = None
    formatter: Callable[[Any, dict], str] | None = Field(default=None, exclude=True)
    badge_variant: Callable[[Any], Variant] | None = Field(default=None, exclude=True)

    def render(self, value: Any, row: dict) -> str:
        if self.formatter is not None:
            return self.formatter(value, row)
        return "" if value is None else str(value)

    def variant(self, value: Any) -> Variant | None:
        if self.badge_variant is None:
            return None
        return self.badge_variant(value)


class FieldValidation(_Frozen):
    min: float | None = None
    max: float | None = None
    pattern: str | None = None
    message: str | None = None


class FieldConfig(_Frozen):
    """A create/edit form input."""

    name: str
    label: str
    type: FieldType
    required: bool = False
    placeholder: str | None = None
    options: tuple[Option, ...] = ()
    validation: FieldValidation | None = None
    default_value: Any = None
    disabled: bool = False
    multiple: bool = False


class Confirmation(_Frozen):
    title: str
    message: str
    confirm_text: str | None = None
    cancel_text: str | None = None


class ActionConfig(_Frozen):
    type: ActionType
    label: str
    icon: str | None = None
    variant: Variant | None = None
    permission: str | None = None
    confirmation: Confirmation | None = None


class SearchFilter(_Frozen):
    name: str
    label: str
    type: Literal["select", "date-range", "checkbox"]
    options: tuple[Option, ...] = ()


class SearchConfig(_Frozen):
    enabled: bool
    placeholder: str = ""
    fields: tuple[str, ...] = ()
    filters: tuple[SearchFilter, ...] = ()


class PaginationConfig(_Frozen):
    enabled: bool = True
    default_page_size: int = 10
    page_size_options: tuple[int, ...] = (5, 10, 20, 50, 100)
    show_size_changer: bool = False


class ImportValidation(_Frozen):
    required_fields: tuple[str, ...] = ()
    unique_fields: tuple[str, ...] = ()


class ImportConfig(_Frozen):
    enabled: bool
    allowed_formats: tuple[FileFormat, ...] = ()
    template_url: str | None = None
    # file column header -> entity field
    mapping: dict[str, str] = Field(default_factory=dict)
    validation: ImportValidation | None = None


class ExportConfig(_Frozen):
    enabled: bool
    formats: tuple[FileFormat, ...] = ()
    default_fields: tuple[str, ...] = ()
    allow_custom_fields: bool = False


class PermissionsConfig(_Frozen):
    """Role names allowed per operation. Declarative only, not enforced here."""

    create: tuple[str, ...] = ()
    read: tuple[str, ...] = ()
    update: tuple[str, ...] = ()
    delete: tuple[str, ...] = ()
    bulk: tuple[str, ...] = ()


class DefaultSort(_Frozen):
    field: str
    direction: SortDirection = "asc"


class Breadcrumb(_Frozen):
    label: str
    path: str | None = None


class EndpointOverrides(_Frozen):
    list: str | None = None
    create: str | None = None
    update: str | None = None
    delete: str | None = None
    bulk: str | None = None


class EntityConfig(_Frozen):
    """Everything the dashboard needs to list, edit and act on one entity type."""

    type: Endpoint
    name: str
    display_name: str
    plural_name: str
    route: str
    breadcrumb: tuple[Breadcrumb, ...] = ()

    columns: tuple[ColumnConfig, ...] = ()
    default_sort: DefaultSort | None = None
    fields: tuple[FieldConfig, ...] = ()
    actions: tuple[ActionConfig, ...] = ()

    search: SearchConfig
    pagination: PaginationConfig = PaginationConfig()
    import_: ImportConfig | None = Field(default=None, alias="import")
    export: ExportConfig | None = None

    permissions: PermissionsConfig | None = None
    endpoints: EndpointOverrides | None = None

    def column(self, key: str) -> ColumnConfig | None:
        return next((c for c in self.columns if c.key == key), None)

    def field(self, name: str) -> FieldConfig | None:
        return next((f for f in self.fields if f.name == name), None)

    def action(self, action_type: ActionType) -> ActionConfig | None:
        return next((a for a in self.actions if a.type == action_type), None)
