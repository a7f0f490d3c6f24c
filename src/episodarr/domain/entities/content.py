"""Tracked content records and the values produced while advancing them."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Content:
    """A tracked series: naming template plus season/episode counters.

    ``first`` and ``second`` are usually season and episode; ``digits`` is the
    zero-padding width applied to both when rendered.
    """

    prefix: str = ""
    title: str = ""
    first_prefix: str = ""
    first: int = 0
    second_prefix: str = ""
    second: int = 0
    digits: int = 0
    postfix: str = ""

    def to_query(self) -> str:
        """Render the search string, e.g. ``"Show S01 E09"``.

        Counters are left-padded with zeros to ``digits``; longer numbers are
        never truncated.
        """
        first = str(self.first).zfill(self.digits)
        second = str(self.second).zfill(self.digits)
        return (
            f"{self.prefix}{self.title} "
            f"{self.first_prefix}{first} "
            f"{self.second_prefix}{second}"
            f"{self.postfix}"
        )

    def predict_next(self) -> list[Content]:
        """Candidates for the next installment, most likely first.

        Next episode of the same season, then episode 1 of the next season.
        """
        next_episode = replace(self, second=self.second + 1)
        next_season = replace(self, first=self.first + 1, second=1)
        return [next_episode, next_season]

    def __str__(self) -> str:
        return self.to_query()


@dataclass(frozen=True)
class WebFile:
    """A located download reference for one content candidate."""

    content: Content
    link: str

    def __str__(self) -> str:
        return f"{self.content} -> {self.link[:15]}..."


@dataclass(frozen=True)
class WebResponse:
    """Raw answer of the download service for a submitted ``WebFile``."""

    web_file: WebFile
    response: str
    success: bool

    def __str__(self) -> str:
        return (
            f"success={str(self.success).lower()} "
            f"content=[{self.web_file}] response={self.response}"
        )
