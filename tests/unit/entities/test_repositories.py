"""Unit tests for banner and admin user repositories."""

from sqlmodel import Session

from src.storefront.entities.banner import BannerCreate, BannerRepository, BannerUpdate
from src.storefront.entities.user import UserRepository


class TestBannerRepository:
    def test_list_orders_by_display_order_then_id(self, session: Session):
        repo = BannerRepository(session)
        late = repo.create(BannerCreate(title="late", display_order=2))
        early = repo.create(BannerCreate(title="early", display_order=0))
        also_early = repo.create(BannerCreate(title="also early", display_order=0))
        session.commit()

        assert [b.id for b in repo.list_all()] == [early.id, also_early.id, late.id]

    def test_enabled_only(self, session: Session):
        repo = BannerRepository(session)
        shown = repo.create(BannerCreate(title="shown"))
        repo.create(BannerCreate(title="hidden", enabled=False))
        session.commit()

        assert [b.id for b in repo.list_all(enabled_only=True)] == [shown.id]

    def test_partial_update(self, session: Session):
        repo = BannerRepository(session)
        banner = repo.create(BannerCreate(title="Sale", title_ar="تخفيضات", button_link="/sale"))
        session.commit()

        updated = repo.update(banner.id, BannerUpdate(title="Big Sale"))

        assert updated.title == "Big Sale"
        assert updated.title_ar == "تخفيضات"
        assert updated.button_link == "/sale"

    def test_missing_banner(self, session: Session):
        repo = BannerRepository(session)

        assert repo.get(1) is None
        assert repo.update(1, BannerUpdate(title="x")) is None
        assert repo.delete(1) is False


class TestUserRepository:
    def test_create_or_replace_keeps_one_row(self, session: Session):
        repo = UserRepository(session)
        first = repo.create_or_replace("web", "hash-1")
        second = repo.create_or_replace("web", "hash-2", role="owner")

        assert first.id == second.id
        assert [u.username for u in repo.list_all()] == ["web"]
        stored = repo.get_by_username("web")
        assert stored.password == "hash-2"
        assert stored.role == "owner"

    def test_unknown_username(self, session: Session):
        assert UserRepository(session).get_by_username("nobody") is None
