"""Orchid Dashboard: products entity configuration."""
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

CATEGORIES = [
    "Electronics", "Software", "Hardware", "Services", "Education",
    "Books", "Clothing", "Food", "Other",
]
TECHNOLOGIES = [
    "React", "Vue.js", "Angular", "Node.js", "Python", "Java", "Docker",
    "Kubernetes", "AWS", "MongoDB", "PostgreSQL", "Other",
]


def _options(values: list[str], with_all: bool = False) -> tuple[Option, ...]:
    opts = [Option(label=v, value=v) for v in values]
    if with_all:
        opts.insert(0, Option(label="All", value=""))
    return tuple(opts)


def _technology_variant(value: Any) -> str:
    tech = str(value or "").lower()
    if tech in ("react", "vue", "angular"):
        return "primary"
    if tech in ("node", "python", "java"):
        return "success"
    if tech in ("docker", "kubernetes"):
        return "info"
    return "secondary"


def _format_price(value: Any, row: dict) -> str:
    try:
        return f"${float(value):.2f}"
    except (TypeError, ValueError):
        return "" if value is None else str(value)


def _format_discount(value: Any, row: dict) -> str:
    return f"{value}%" if value else "-"


def _format_description(value: Any, row: dict) -> str:
    if value and len(value) > 50:
        return f"{value[:50]}..."
    return value or ""


PRODUCTS_CONFIG = EntityConfig(
    type="products",
    name="product",
    display_name="Product",
    plural_name="Products",
    route="/products",
    breadcrumb=(
        Breadcrumb(label="Home", path="/dashboard"),
        Breadcrumb(label="E-commerce", path="/products"),
        Breadcrumb(label="Products"),
    ),
    columns=(
        ColumnConfig(key="id", label="ID", type="number", sortable=True, width="80px"),
        ColumnConfig(key="name", label="Product Name", sortable=True, searchable=True),
        ColumnConfig(key="category", label="Category", sortable=True, searchable=True),
        ColumnConfig(
            key="technology",
            label="Technology",
            type="badge",
            sortable=True,
            searchable=True,
            badge_variant=_technology_variant,
        ),
        ColumnConfig(key="price", label="Price", type="number", sortable=True, formatter=_format_price),
        ColumnConfig(key="discount", label="Discount", type="number", sortable=True, formatter=_format_discount),
        ColumnConfig(key="description", label="Description", searchable=True, formatter=_format_description),
    ),
    default_sort=DefaultSort(field="name", direction="asc"),
    fields=(
        FieldConfig(
            name="name",
            label="Product Name",
            type="text",
            required=True,
            placeholder="Enter product name",
            validation=FieldValidation(min=3, max=200, message="Product name must be between 3 and 200 characters"),
        ),
        FieldConfig(name="category", label="Category", type="select", required=True, options=_options(CATEGORIES)),
        FieldConfig(
            name="technology",
            label="Technology Stack",
            type="select",
            required=True,
            options=_options(TECHNOLOGIES),
        ),
        FieldConfig(
            name="price",
            label="Price",
            type="number",
            required=True,
            placeholder="0.00",
            validation=FieldValidation(min=0, max=999999.99, message="Price must be between 0 and 999999.99"),
        ),
        FieldConfig(
            name="discount",
            label="Discount (%)",
            type="number",
            placeholder="0",
            default_value=0,
            validation=FieldValidation(min=0, max=100, message="Discount must be between 0 and 100"),
        ),
        FieldConfig(
            name="description",
            label="Description",
            type="textarea",
            required=True,
            placeholder="Enter product description",
            validation=FieldValidation(min=10, max=2000, message="Description must be between 10 and 2000 characters"),
        ),
    ),
    actions=(
        ActionConfig(type="create", label="Add Product", icon="plus", variant="primary"),
        ActionConfig(type="edit", label="Edit", icon="edit"),
        ActionConfig(
            type="delete",
            label="Delete",
            icon="trash",
            variant="danger",
            confirmation=Confirmation(
                title="Delete Product",
                message="Are you sure you want to delete this product? This action cannot be undone.",
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
                title="Delete Products",
                message="Are you sure you want to delete {count} selected products? This action cannot be undone.",
                confirm_text="Delete",
                cancel_text="Cancel",
            ),
        ),
        ActionConfig(type="import", label="Import Products", icon="upload", variant="secondary"),
        ActionConfig(type="export", label="Export Products", icon="download", variant="secondary"),
    ),
    search=SearchConfig(
        enabled=True,
        placeholder="Search for products by name, category, technology...",
        fields=("name", "category", "technology", "description"),
        filters=(
            SearchFilter(name="category", label="Category", type="select", options=_options(CATEGORIES, with_all=True)),
            SearchFilter(
                name="technology",
                label="Technology",
                type="select",
                options=_options(TECHNOLOGIES, with_all=True),
            ),
            SearchFilter(
                name="priceRange",
                label="Price Range",
                type="select",
                options=(
                    Option(label="All", value=""),
                    Option(label="Under $50", value="0-50"),
                    Option(label="$50 - $100", value="50-100"),
                    Option(label="$100 - $500", value="100-500"),
                    Option(label="Over $500", value="500+"),
                ),
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
        template_url="/templates/products-import-template.csv",
        mapping={
            "Product Name": "name",
            "Category": "category",
            "Technology": "technology",
            "Price": "price",
            "Discount": "discount",
            "Description": "description",
        },
        validation=ImportValidation(
            required_fields=("name", "category", "technology", "price", "description"),
            unique_fields=("name",),
        ),
    ),
    export=ExportConfig(
        enabled=True,
        formats=("csv", "xlsx", "json"),
        default_fields=("id", "name", "category", "technology", "price", "discount"),
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
