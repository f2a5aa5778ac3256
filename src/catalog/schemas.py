"""Strict models of the TMDB payloads we consume. Nothing loosely typed gets past these."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, field_validator

from src.core.models import CastMember, Movie


class _TMDBModel(BaseModel):
    # unknown keys are dropped, the keys we do read use strict types
    model_config = ConfigDict(extra="ignore")


class ApiMovie(_TMDBModel):
    id: StrictInt
    title: StrictStr
    release_date: Optional[StrictStr] = None

    @field_validator("release_date")
    @classmethod
    def validate_release_date(cls, value: Optional[str]) -> Optional[str]:
        """TMDB sends 'YYYY-MM-DD', or an empty string when the date is unknown."""
        if not value:
            return None
        year = value.split("-")[0]
        if len(year) != 4 or not year.isdigit():
            raise ValueError(f"Cannot interpret release_date: {value!r}")
        return value

    @property
    def year(self) -> Optional[int]:
        return int(self.release_date[:4]) if self.release_date else None

    def to_movie(self) -> Movie:
        return Movie(id=self.id, title=self.title, year=self.year)


class ApiMovieList(_TMDBModel):
    """Paged list response (search, top rated)."""

    results: list[ApiMovie]


class ApiCastMember(_TMDBModel):
    id: StrictInt
    name: StrictStr

    def to_cast_member(self) -> CastMember:
        return CastMember(id=self.id, name=self.name)


class ApiCredits(_TMDBModel):
    cast: list[ApiCastMember]
