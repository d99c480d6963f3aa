"""Orchid Dashboard: users entity configuration."""
from typing import Any

from orchid.schemas.entity import (
    ActionConfig,
    Breadcrumb,
    ColumnConfig,
    Confirmation,
    DefaultSort,
    EntityConfig,
    ExportConfig,
    FieldConfig,
    FieldValidation,
    ImportConfig,
    ImportValidation,
    Option,
    PaginationConfig,
    PermissionsConfig,
    SearchConfig,
    SearchFilter,
)

COUNTRIES = [
    "United States", "United Kingdom", "Canada", "Australia",
    "Germany", "France", "Vietnam", "Japan",
]
STATUSES = (
    Option(label="Active", value="active"),
    Option(label="Inactive", value="inactive"),
    Option(label="Pending", value="pending"),
)

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


def _status_variant(value: Any) -> str:
    return {"active": "success", "inactive": "warning", "pending": "info"}.get(value, "secondary")


def _format_avatar(value: Any, row: dict) -> str:
    return f'<img src="{value}" alt="Avatar" class="w-10 h-10 rounded-full" />'


USERS_CONFIG = EntityConfig(
    type="users",
    name="user",
    display_name="User",
    plural_name="Users",
    route="/users",
    breadcrumb=(
        Breadcrumb(label="Home", path="/dashboard"),
        Breadcrumb(label="Users", path="/users"),
        Breadcrumb(label="List"),
    ),
    columns=(
        ColumnConfig(key="id", label="ID", type="number", sortable=True, width="80px"),
        ColumnConfig(key="avatar", label="Avatar", type="avatar", width="80px", formatter=_format_avatar),
        ColumnConfig(key="name", label="Name", sortable=True, searchable=True),
        ColumnConfig(key="email", label="Email", sortable=True, searchable=True),
        ColumnConfig(key="position", label="Position", sortable=True, searchable=True),
        ColumnConfig(key="country", label="Country", sortable=True, searchable=True),
        ColumnConfig(key="status", label="Status", type="badge", sortable=True, badge_variant=_status_variant),
    ),
    default_sort=DefaultSort(field="name", direction="asc"),
    fields=(
        FieldConfig(
            name="name",
            label="Full Name",
            type="text",
            required=True,
            placeholder="Enter full name",
            validation=FieldValidation(min=2, max=100, message="Name must be between 2 and 100 characters"),
        ),
        FieldConfig(
            name="email",
            label="Email Address",
            type="email",
            required=True,
            placeholder="Enter email address",
            validation=FieldValidation(pattern=EMAIL_PATTERN, message="Please enter a valid email address"),
        ),
        FieldConfig(name="position", label="Position", type="text", placeholder="Enter job position"),
        FieldConfig(
            name="country",
            label="Country",
            type="select",
            options=tuple(Option(label=c, value=c) for c in COUNTRIES),
        ),
        FieldConfig(
            name="status",
            label="Status",
            type="select",
            required=True,
            default_value="active",
            options=STATUSES,
        ),
        FieldConfig(
            name="biography",
            label="Biography",
            type="textarea",
            placeholder="Enter user biography",
            validation=FieldValidation(max=1000, message="Biography must be less than 1000 characters"),
        ),
        FieldConfig(
            name="avatar",
            label="Profile Picture",
            type="file",
            validation=FieldValidation(message="Please upload a valid image file"),
        ),
    ),
    actions=(
        ActionConfig(type="create", label="Add User", icon="plus", variant="primary"),
        ActionConfig(type="edit", label="Edit", icon="edit"),
        ActionConfig(
            type="delete",
            label="Delete",
            icon="trash",
            variant="danger",
            confirmation=Confirmation(
                title="Delete User",
                message="Are you sure you want to delete this user? This action cannot be undone.",
                confirm_text="Delete",
                cancel_text="Cancel",
            ),
        ),
        ActionConfig(type="bulk-edit", label="Edit Selected", icon="edit", variant="warning"),
        ActionConfig(
            type="bulk-delete",
            label="Delete Selected",
            icon="trash",
            variant="danger",
            confirmation=Confirmation(
                title="Delete Users",
                message="Are you sure you want to delete {count} selected users? This action cannot be undone.",
                confirm_text="Delete",
                cancel_text="Cancel",
            ),
        ),
        ActionConfig(type="import", label="Import Users", icon="upload", variant="secondary"),
        ActionConfig(type="export", label="Export Users", icon="download", variant="secondary"),
    ),
    search=SearchConfig(
        enabled=True,
        placeholder="Search for users by name, email, position...",
        fields=("name", "email", "position", "country"),
        filters=(
            SearchFilter(
                name="status",
                label="Status",
                type="select",
                options=(Option(label="All", value=""), *STATUSES),
            ),
            SearchFilter(
                name="country",
                label="Country",
                type="select",
                options=(Option(label="All", value=""), *(Option(label=c, value=c) for c in COUNTRIES)),
            ),
        ),
    ),
    pagination=PaginationConfig(
        enabled=True,
        default_page_size=10,
        page_size_options=(5, 10, 20, 50, 100),
        show_size_changer=True,
    ),
    import_=ImportConfig(
        enabled=True,
        allowed_formats=("csv", "xlsx", "json"),
        template_url="/templates/users-import-template.csv",
        mapping={
            "Name": "name",
            "Email": "email",
            "Position": "position",
            "Country": "country",
            "Status": "status",
            "Biography": "biography",
        },
        validation=ImportValidation(required_fields=("name", "email"), unique_fields=("email",)),
    ),
    export=ExportConfig(
        enabled=True,
        formats=("csv", "xlsx", "json"),
        default_fields=("id", "name", "email", "position", "country", "status"),
        allow_custom_fields=True,
    ),
    permissions=PermissionsConfig(
        create=("admin", "manager"),
        read=("admin", "manager", "employee"),
        update=("admin", "manager"),
        delete=("admin",),
        bulk=("admin", "manager"),
    ),
)
