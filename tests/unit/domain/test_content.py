"""Tests for Content rendering and next-installment prediction."""

from __future__ import annotations

from dataclasses import replace

from episodarr.domain.entities import Content, WebFile, WebResponse


class TestToQuery:
    def test_pads_counters_to_digits(self) -> None:
        c = Content(
            title="Show",
            first_prefix="S",
            first=1,
            second_prefix="E",
            second=9,
            digits=2,
        )
        assert c.to_query() == "Show S01 E09"

    def test_prefix_and_postfix_are_verbatim(self) -> None:
        c = Content(
            prefix="[Group] ",
            title="Show",
            first_prefix="Season ",
            first=3,
            second_prefix="Episode ",
            second=12,
            digits=3,
            postfix=" 1080p",
        )
        assert c.to_query() == "[Group] Show Season 003 Episode 012 1080p"

    def test_numbers_longer_than_digits_are_not_truncated(self) -> None:
        c = Content(title="Show", first=2024, second=123, digits=2)
        assert c.to_query() == "Show 2024 123"

    def test_zero_digits_means_no_padding(self) -> None:
        c = Content(title="Show", first_prefix="S", first=1, second_prefix="E", second=2)
        assert c.to_query() == "Show S1 E2"

    def test_padded_width_matches_digits(self) -> None:
        for digits in range(0, 5):
            for number in (0, 7, 42, 1234):
                c = Content(title="T", first=number, second=number, digits=digits)
                _, first, second = c.to_query().split(" ")
                assert len(first) >= digits
                assert int(first) == number
                assert first == second
                if len(str(number)) <= digits:
                    assert len(first) == digits

    def test_str_is_query(self, content: Content) -> None:
        assert str(content) == content.to_query() == "Show S01 E05"


class TestPredictNext:
    def test_next_episode_then_next_season(self, content: Content) -> None:
        predictions = content.predict_next()
        assert [(p.first, p.second) for p in predictions] == [(1, 6), (2, 1)]

    def test_other_fields_unchanged(self, content: Content) -> None:
        for p in content.predict_next():
            assert replace(p, first=content.first, second=content.second) == content

    def test_does_not_mutate_original(self, content: Content) -> None:
        content.predict_next()
        assert (content.first, content.second) == (1, 5)

    def test_from_zero_counters(self) -> None:
        c = Content(title="Pilot", first=0, second=0)
        assert [(p.first, p.second) for p in c.predict_next()] == [(0, 1), (1, 1)]


class TestDisplay:
    def test_web_file_truncates_link(self, content: Content) -> None:
        wf = WebFile(content=content, link="magnet:?xt=urn:btih:0123456789")
        assert str(wf) == "Show S01 E05 -> magnet:?xt=urn:..."

    def test_web_response(self, web_file: WebFile) -> None:
        resp = WebResponse(web_file=web_file, response="Ok.", success=True)
        assert str(resp) == f"success=true content=[{web_file}] response=Ok."
