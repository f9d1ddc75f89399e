import logging

from sqlalchemy.orm import Session

from .. import models

logger = logging.getLogger(__name__)

NAVIGATION_DATA = [
    {
        "path": "/",
        "label": "ダッシュボード",
        "icon_name": "LayoutDashboard",
        "sort_order": 1,
        "is_active": True,
    },
    {
        "path": "/payslips",
        "label": "給与明細一覧",
        "icon_name": "FileText",
        "sort_order": 2,
        "is_active": True,
    },
    {
        "path": "/payslips/upload",
        "label": "給与明細アップロード",
        "icon_name": "Upload",
        "sort_order": 3,
        "is_active": True,
    },
]


def seed_navigation(db: Session) -> None:
    """Insert or update the default sidebar entries, keyed by path."""
    for nav in NAVIGATION_DATA:
        item = db.query(models.Navigation).filter_by(path=nav["path"]).first()
        if item is None:
            db.add(models.Navigation(**nav))
        else:
            for key, value in nav.items():
                setattr(item, key, value)
    db.commit()
    logger.info("Seeded %d navigation items", len(NAVIGATION_DATA))


def get_active_navigation_items(db: Session) -> list[models.Navigation]:
    return (
        db.query(models.Navigation)
        .filter(models.Navigation.is_active.is_(True))
        .order_by(models.Navigation.sort_order.asc())
        .all()
    )


def get_all_navigation_items(db: Session) -> list[models.Navigation]:
    return db.query(models.Navigation).order_by(models.Navigation.sort_order.asc()).all()
