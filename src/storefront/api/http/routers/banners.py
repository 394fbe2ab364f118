"""Banner API router with CRUD operations."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from src.storefront.api.http.deps import get_db_session, require_admin
from src.storefront.core.exceptions import NotFoundError
from src.storefront.entities.banner import Banner, BannerCreate, BannerRepository, BannerUpdate
from src.storefront.entities.user import AdminIdentity

router = APIRouter(prefix="/banners", tags=["banners"])


@router.get("", response_model=list[Banner])
def list_banners(
    enabled_only: bool = False,
    session: Session = Depends(get_db_session),
) -> list[Banner]:
    """List banners in carousel order."""
    return BannerRepository(session).list_all(enabled_only=enabled_only)


@router.get("/{banner_id}", response_model=Banner)
def get_banner(
    banner_id: int,
    session: Session = Depends(get_db_session),
) -> Banner:
    banner = BannerRepository(session).get(banner_id)
    if banner is None:
        raise NotFoundError("Banner not found")
    return banner


@router.post("", response_model=Banner)
def create_banner(
    banner: BannerCreate,
    _: AdminIdentity = Depends(require_admin),
    session: Session = Depends(get_db_session),
) -> Banner:
    created = BannerRepository(session).create(banner)
    session.commit()
    return created


@router.put("/{banner_id}", response_model=Banner)
def update_banner(
    banner_id: int,
    changes: BannerUpdate,
    _: AdminIdentity = Depends(require_admin),
    session: Session = Depends(get_db_session),
) -> Banner:
    """Update only the fields present in the body."""
    updated = BannerRepository(session).update(banner_id, changes)
    if updated is None:
        raise NotFoundError("Banner not found")
    session.commit()
    return updated


@router.delete("/{banner_id}")
def delete_banner(
    banner_id: int,
    _: AdminIdentity = Depends(require_admin),
    session: Session = Depends(get_db_session),
) -> dict[str, str]:
    if not BannerRepository(session).delete(banner_id):
        raise NotFoundError("Banner not found")
    session.commit()
    return {"message": "Banner deleted successfully"}
