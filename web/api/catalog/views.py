"""Catalog API views - thin layer over services."""

from app.container import container
from app.models.catalog import Category, Product
from web.api.errors import (
    NotFoundError,
    request_view,
    validate_page,
    validate_price_range,
    validate_slug,
)

from .schemas import (
    CategoriesResponse,
    CategoryItem,
    CategoryPageResponse,
    HomeResponse,
    ImageItem,
    ImageResponse,
    Pagination,
    ProductItem,
    ProductPageResponse,
    ProductsResponse,
)


def category_item(c: Category) -> CategoryItem:
    return CategoryItem(
        id=c.id,
        name=c.name,
        slug=c.slug,
        description=c.description,
        product_count=c.product_count,
    )


def product_item(p: Product) -> ProductItem:
    return ProductItem(
        id=p.id,
        name=p.name,
        slug=p.slug,
        description=p.description,
        price=p.price,
        discounted_price=p.discounted_price,
        effective_price=p.effective_price,
        category_id=p.category_id,
        category_name=p.category_name,
        category_slug=p.category_slug,
        stock=p.stock,
        images=[
            ImageItem(id=img["id"], color=img.get("color"), url=f"/api/product-images/{img['id']}")
            for img in p.images
        ],
    )


@request_view
def get_home() -> HomeResponse:
    """Home page data."""
    data = container.catalog.get_home()
    return HomeResponse(
        categories=[category_item(c) for c in data["categories"]],
        featured=[product_item(p) for p in data["featured"]],
    )


@request_view
def get_categories() -> CategoriesResponse:
    """All categories."""
    return CategoriesResponse(items=[category_item(c) for c in container.catalog.get_categories()])


@request_view
def get_category(slug: str, sort: str | None = None, page: int = 1, limit: int = 12) -> CategoryPageResponse:
    """Category page with one page of products."""
    validate_slug(slug)
    validate_page(page, limit)
    data = container.catalog.get_category_page(slug, sort=sort, page=page, limit=limit)
    if data is None:
        raise NotFoundError(f"Category not found: {slug}")

    return CategoryPageResponse(
        category=category_item(data["category"]),
        items=[product_item(p) for p in data["products"]],
        pagination=Pagination(**data["pagination"]),
    )


@request_view
def get_products(
    category: str | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    sort: str | None = None,
    page: int = 1,
    limit: int = 12,
) -> ProductsResponse:
    """Filtered product listing."""
    validate_page(page, limit)
    validate_price_range(min_price, max_price)
    data = container.catalog.list_products(category, min_price, max_price, sort, page, limit)
    return ProductsResponse(
        items=[product_item(p) for p in data["products"]],
        pagination=Pagination(**data["pagination"]),
    )


@request_view
def get_product(slug: str) -> ProductPageResponse:
    """Product detail page."""
    validate_slug(slug)
    data = container.catalog.get_product_page(slug)
    if data is None:
        raise NotFoundError(f"Product not found: {slug}")

    return ProductPageResponse(
        product=product_item(data["product"]),
        related=[product_item(p) for p in data["related"]],
    )


@request_view
def search_products(q: str | None = None) -> ProductsResponse:
    """Search suggestions (first 5 matches)."""
    items = [product_item(p) for p in container.catalog.search(q or "")]
    return ProductsResponse(
        items=items,
        pagination=Pagination(total=len(items), pages=1 if items else 0, page=1, limit=5),
    )


def get_product_image(slug: str) -> ImageResponse:
    """First image of a product, served from the database."""
    validate_slug(slug)
    image = container.catalog.get_product_image(slug)
    if image is None:
        raise NotFoundError("Image not found")
    return ImageResponse(content=image.data, content_type=image.content_type)


def get_image(image_id: str) -> ImageResponse:
    """Image by id."""
    image = container.catalog.get_image(image_id)
    if image is None:
        raise NotFoundError("Image not found")
    return ImageResponse(content=image.data, content_type=image.content_type)
