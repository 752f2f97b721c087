"""
Name / description split for long menu labels.

Run: python -m pytest tests/test_name_split.py -v
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from menuscan.menu_types import NameSplit
from menuscan.parsers.menu_text import parse_ocr_menu_text
from menuscan.parsers.name_split import SHORT_LABEL_MAX, split_name_and_description


class TestShortLabels:

    @pytest.mark.parametrize("label", [
        "Soup - tomato",
        "Cevapi sa lukom",
        "Grilled salmon with herbs",
        "a" * SHORT_LABEL_MAX,
        "Pljeskavica: meso, luk, kajmak",
        "",
    ])
    def test_short_label_returned_unsplit(self, label):
        assert split_name_and_description(label) == NameSplit(name=label)

    def test_exactly_threshold_not_split(self):
        label = "Burger - beef, cheddar, pickles, onion 1"[:SHORT_LABEL_MAX]
        assert len(label) == SHORT_LABEL_MAX
        assert split_name_and_description(label).description is None


class TestSeparators:

    def test_dash_separator(self):
        out = split_name_and_description("Chicken Caesar Salad - romaine, parmesan, croutons")
        assert out.name == "Chicken Caesar Salad"
        assert out.description == "romaine, parmesan, croutons"

    def test_colon_separator(self):
        out = split_name_and_description("Pljeskavica: mleveno meso, luk, kajmak i lepinja")
        assert out.name == "Pljeskavica"
        assert out.description == "mleveno meso, luk, kajmak i lepinja"

    def test_en_dash_separator(self):
        out = split_name_and_description("Tagliatelle ai funghi – porcini, cream, parmigiano")
        assert out.name == "Tagliatelle ai funghi"
        assert out.description == "porcini, cream, parmigiano"

    def test_separator_beats_connector(self):
        out = split_name_and_description(
            "Grilled salmon with herbs - lemon butter sauce and rice"
        )
        assert out.name == "Grilled salmon with herbs"
        assert out.description == "lemon butter sauce and rice"

    def test_too_short_name_side_rejected(self):
        label = "AB - something long enough here and more text"
        assert split_name_and_description(label) == NameSplit(name=label)

    def test_later_separator_used_when_first_fails_guard(self):
        out = split_name_and_description("XL - Family pizza - tomato, mozzarella, basil, oregano")
        assert out.name == "XL - Family pizza"
        assert out.description == "tomato, mozzarella, basil, oregano"


class TestConnectors:

    def test_serbian_connector_kept_in_description(self):
        out = split_name_and_description("Fileti morske ribe sa blitvom i krompirom")
        assert out.name == "Fileti morske ribe"
        assert out.description == "sa blitvom i krompirom"

    def test_trailing_price_not_carried_into_description(self):
        out = split_name_and_description("Fileti morske ribe sa blitvom i krompirom 1550")
        assert out.name == "Fileti morske ribe"
        assert out.description == "sa blitvom i krompirom"

    def test_parsed_label_then_split(self):
        items = parse_ocr_menu_text("Fileti morske ribe sa blitvom i krompirom 1550")
        assert items[0].price == 1550
        out = split_name_and_description(items[0].label)
        assert out == NameSplit(name="Fileti morske ribe", description="sa blitvom i krompirom")

    def test_served_with_phrase(self):
        out = split_name_and_description("Slow cooked beef cheeks served with creamy polenta")
        assert out.name == "Slow cooked beef cheeks"
        assert out.description == "served with creamy polenta"

    def test_connector_case_insensitive(self):
        out = split_name_and_description("Pan seared duck breast WITH cherry reduction sauce")
        assert out.name == "Pan seared duck breast"
        assert out.description == "WITH cherry reduction sauce"

    def test_connector_only_as_whole_word(self):
        label = "Extraordinarily long dish name without any connector x"
        assert split_name_and_description(label) == NameSplit(name=label)

    def test_no_words_lost(self):
        label = "Domaca teleca corba uz svez hleb i kiselu pavlaku"
        out = split_name_and_description(label)
        assert out.description.startswith("uz ")
        assert f"{out.name} {out.description}" == label

    def test_nothing_qualifies(self):
        label = "Extra large family size margherita pizza slice"
        assert len(label) > SHORT_LABEL_MAX
        assert split_name_and_description(label) == NameSplit(name=label)
