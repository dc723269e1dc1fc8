"""
Category and menu item schemas

Both carry bilingual labels (English and Somali). When only the English name is
supplied, ``name`` and ``nameSo`` fall back to it.
"""

from typing import Optional

from pydantic import Field, model_validator

from .base import CamelModel, PatchModel


class _BilingualNames(CamelModel):
    name: Optional[str] = Field(default=None, max_length=200)
    name_en: str = Field(..., min_length=1, max_length=200)
    name_so: Optional[str] = Field(default=None, max_length=200)

    @model_validator(mode="after")
    def _fill_names_from_english(self):
        if not self.name:
            self.name = self.name_en
        if not self.name_so:
            self.name_so = self.name_en
        return self


class CategoryCreate(_BilingualNames):
    """Insert shape of a category"""

    description: Optional[str] = None
    is_active: bool = True


class CategoryUpdate(PatchModel):
    """Partial category update"""

    nullable_fields = frozenset({"description"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    name_en: Optional[str] = Field(default=None, min_length=1, max_length=200)
    name_so: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class CategoryRecord(CamelModel):
    """Stored category"""

    id: int
    name: str
    name_en: str
    name_so: str
    description: Optional[str] = None
    is_active: bool = True


class MenuItemCreate(_BilingualNames):
    """Insert shape of a menu item; price is in minor currency units"""

    description: str = ""
    price: int = Field(..., ge=0)
    category_id: Optional[int] = None
    image: Optional[str] = None
    is_available: bool = True
    is_active: bool = True


class MenuItemUpdate(PatchModel):
    """Partial menu item update"""

    nullable_fields = frozenset({"category_id", "image"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    name_en: Optional[str] = Field(default=None, min_length=1, max_length=200)
    name_so: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    price: Optional[int] = Field(default=None, ge=0)
    category_id: Optional[int] = None
    image: Optional[str] = None
    is_available: Optional[bool] = None
    is_active: Optional[bool] = None


class MenuItemRecord(CamelModel):
    """Stored menu item"""

    id: int
    name: str
    name_en: str
    name_so: str
    description: str = ""
    price: int
    category_id: Optional[int] = None
    image: Optional[str] = None
    is_available: bool = True
    is_active: bool = True
