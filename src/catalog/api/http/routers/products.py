"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from src.catalog.api.http.deps import get_product_service
from src.catalog.core.services import ProductService
from src.catalog.entities.product import Product

router = APIRouter(prefix="/products", tags=["products"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")


@router.get("", response_model=list[Product])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products."""
    return service.get_all()


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by ID, served from the lookup cache when possible."""
    product = service.get_by_id(product_id)
    if product is None:
        raise _not_found()
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product: Product,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product. Any id in the body is ignored."""
    created = service.add(product)
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=str(created.id))
    )
    return created


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def update_product(
    product_id: int,
    product_update: Product,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Replace a product after checking that it exists."""
    if service.get_by_id(product_id) is None:
        raise _not_found()

    # The path id wins over any id in the body
    product_update.id = product_id
    service.update(product_update)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product after checking that it exists."""
    if service.get_by_id(product_id) is None:
        raise _not_found()

    service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
