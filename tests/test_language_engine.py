import pytest

from jewelry_design.language_engine import DesignDescriber, describe, format_price
from jewelry_design.language_engine import phrases
from jewelry_design.selection.types import DesignSelection, GemType, JewelryType, MetalType, Shape


@pytest.fixture
def describer():
    return DesignDescriber()


class TestFullText:

    def test_single_gem_ring(self, describer):
        selection = DesignSelection(gem_type="diamond")
        text = describer.describe(selection, "900.00")

        assert text == (
            "Exquisite ring crafted from lustrous 18k gold featuring perfectly round "
            "diamond (1.0 ct).\n\n"
            "This ring features a band crafted from lustrous 18k gold and is available "
            "in size 7. The perfectly round diamond is meticulously set to showcase its "
            "brilliant and clear diamond of exceptional clarity.\n\n"
            "Estimated value: $900.00."
        )

    def test_multiple_gem_earrings_with_engraving(self, describer):
        selection = DesignSelection(
            jewelry_type="earrings",
            metal_type="silver",
            gem_type="sapphire",
            gem_size=0.5,
            gem_count=3,
            shape="triangle",
            engraving_text="Love",
        )
        text = describer.describe(selection, "123.45")

        assert text == (
            "Exquisite earrings crafted from polished sterling silver featuring 3 "
            "geometric triangular sapphires (0.5 ct each).\n\n"
            "These earrings are meticulously crafted from polished sterling silver. "
            "Each earring showcases multiple geometric triangular sapphires that capture "
            "the deep blue sapphire of remarkable intensity.\n\n"
            'Personalized with the engraving: "Love".\n\n'
            "Estimated value: $123.45."
        )

    def test_gemless_necklace(self, describer):
        selection = DesignSelection(jewelry_type="necklace", metal_type="platinum", shape="heart")
        text = describer.describe(selection, 600)

        assert text == (
            "Exquisite necklace crafted from premium platinum with a romantic "
            "heart-shaped design.\n\n"
            "This necklace features a delicate chain crafted from premium platinum. "
            "The romantic heart-shaped pendant creates an elegant focal point.\n\n"
            "Estimated value: $600.00."
        )

    def test_custom_shape_bracelet_with_rubies(self, describer):
        selection = DesignSelection(
            jewelry_type="bracelet", gem_type="ruby", gem_count=2, gem_size=2.0, shape="custom-3"
        )
        text = describer.describe(selection, "1.00")

        assert "featuring 2 custom-designed rubies (2.0 ct each)." in text
        assert (
            "The custom-designed rubies are artfully arranged to showcase their "
            "rich red ruby of profound depth of color."
        ) in text


class TestTemplates:

    @pytest.mark.parametrize("kind", list(JewelryType))
    def test_every_type_with_and_without_gem(self, describer, kind):
        for gem in (None, GemType.EMERALD):
            text = describer.describe(DesignSelection(jewelry_type=kind, gem_type=gem), "1.00")
            assert text.startswith(f"Exquisite {kind.value} crafted from")
            assert text.endswith("Estimated value: $1.00.")
            assert len(text.split("\n\n")) == 3

    def test_necklace_accents_agreement(self, describer):
        single = describer.describe(
            DesignSelection(jewelry_type="necklace", gem_type="topaz"), "1"
        )
        multi = describer.describe(
            DesignSelection(jewelry_type="necklace", gem_type="topaz", gem_count=4), "1"
        )
        assert "The perfectly round topaz pendant is carefully positioned to highlight its" in single
        assert "pendant and accents are carefully positioned to highlight their" in multi

    def test_gemless_bracelet_and_earrings(self, describer):
        bracelet = describer.describe(DesignSelection(jewelry_type="bracelet"), "1")
        earrings = describer.describe(DesignSelection(jewelry_type="earrings", shape="square"), "1")
        assert "elements create a striking pattern along its length." in bracelet
        assert "Their contemporary square design offers a sophisticated finish." in earrings

    def test_half_ring_size(self, describer):
        text = describer.describe(DesignSelection(ring_size=7.5), "1")
        assert "available in size 7.5." in text


class TestLookupTables:

    @pytest.mark.parametrize("metal", list(MetalType))
    def test_metal_phrase(self, describer, metal):
        text = describer.describe(DesignSelection(metal_type=metal), "1")
        assert phrases.METAL_PHRASES[metal] in text

    @pytest.mark.parametrize("shape", list(Shape))
    def test_shape_phrase(self, describer, shape):
        text = describer.describe(DesignSelection(shape=shape.value), "1")
        assert phrases.SHAPE_PHRASES[shape.value] in text

    @pytest.mark.parametrize("gem", list(GemType))
    def test_gem_phrases(self, describer, gem):
        text = describer.describe(DesignSelection(gem_type=gem), "1")
        assert phrases.GEM_QUALITY_PHRASES[gem] in text
        assert phrases.GEM_COLOR_PHRASES[gem] in text

    def test_tables_cover_enums(self):
        assert set(phrases.METAL_PHRASES) == set(MetalType)
        assert set(phrases.GEM_QUALITY_PHRASES) == set(GemType)
        assert set(phrases.SHAPE_PHRASES) == {s.value for s in Shape}


class TestContract:

    def test_idempotent(self, describer):
        selection = DesignSelection(gem_type="amethyst", gem_count=5, engraving_text="Ever")
        assert describer.describe(selection, "10.00") == describer.describe(selection, "10.00")

    def test_does_not_mutate_selection(self, describer):
        selection = DesignSelection(gem_type="ruby")
        before = selection.model_dump()
        describer.describe(selection, "5.00")
        assert selection.model_dump() == before

    def test_malformed_mapping_degrades(self):
        text = describe(
            {"jewelryType": "crown", "metalType": "unobtainium", "gemType": "opal", "gemSize": 99},
            "1.00",
        )
        assert text.startswith("Exquisite ring crafted from lustrous 18k gold with a perfectly round design.")

    def test_mapping_with_gem_is_clamped(self):
        text = describe({"gem_type": "diamond", "gem_size": 10, "gem_count": 1}, "1.00")
        assert "(3.0 ct)" in text

    def test_format_price(self):
        assert format_price(900) == "900.00"
        assert format_price(12.5) == "12.50"
        assert format_price("7") == "7"
