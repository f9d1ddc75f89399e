from fastapi import APIRouter, Cookie, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.settings import NavigationItem, Theme, ThemeRead, ThemeUpdate
from ..services.navigation import get_active_navigation_items, get_all_navigation_items

router = APIRouter()

THEMES = ("light", "dark")
THEME_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


def get_theme_from_cookie(value: str | None) -> Theme:
    return value if value in THEMES else "light"


def get_next_theme(current: Theme) -> Theme:
    return "light" if current == "dark" else "dark"


@router.get('/theme', response_model=ThemeRead)
def read_theme(theme: str | None = Cookie(None)):
    return ThemeRead(theme=get_theme_from_cookie(theme))


@router.post('/theme', response_model=ThemeRead)
def update_theme(data: ThemeUpdate, response: Response):
    if data.theme not in THEMES:
        raise HTTPException(status_code=400, detail="Invalid theme")
    response.set_cookie(
        "theme",
        data.theme,
        max_age=THEME_COOKIE_MAX_AGE,
        path="/",
        httponly=True,
        samesite="lax",
    )
    return ThemeRead(theme=data.theme)


@router.post('/theme/toggle', response_model=ThemeRead)
def toggle_theme(response: Response, theme: str | None = Cookie(None)):
    return update_theme(ThemeUpdate(theme=get_next_theme(get_theme_from_cookie(theme))), response)


@router.get('/navigation', response_model=list[NavigationItem])
def navigation(include_inactive: bool = False, db: Session = Depends(get_db)):
    if include_inactive:
        items = get_all_navigation_items(db)
    else:
        items = get_active_navigation_items(db)
    return [NavigationItem.model_validate(i) for i in items]
