import pytest
from pydantic import ValidationError

from jewelry_design.selection import (
    DEFAULT_SELECTION,
    DesignSelection,
    ExtractionResult,
    GemType,
    JewelryType,
    MetalType,
    coerce_selection,
)


class TestDesignSelection:

    def test_defaults(self):
        sel = DesignSelection()
        assert sel.jewelry_type == JewelryType.RING
        assert sel.metal_type == MetalType.GOLD
        assert sel.gem_type is None
        assert sel.gem_size == 1.0
        assert sel.gem_count == 1
        assert sel.ring_size == 7.0
        assert sel.shape == "round"
        assert sel.engraving_text == ""

    def test_accepts_camel_case_aliases(self):
        sel = DesignSelection(**{"jewelryType": "necklace", "metalType": "rose-gold", "gemType": "topaz"})
        assert sel.jewelry_type == JewelryType.NECKLACE
        assert sel.metal_type == MetalType.ROSE_GOLD
        assert sel.gem_type == GemType.TOPAZ

    @pytest.mark.parametrize(
        "field, value",
        [
            ("gem_size", 3.5),
            ("gem_count", 0),
            ("ring_size", 14),
            ("engraving_text", "x" * 21),
            ("shape", "star"),
            ("metal_type", "bronze"),
        ],
    )
    def test_rejects_out_of_domain(self, field, value):
        with pytest.raises(ValidationError):
            DesignSelection(**{field: value})

    def test_custom_shape_id_passes_through(self):
        sel = DesignSelection(shape="custom-12")
        assert sel.shape == "custom-12"
        assert sel.has_custom_shape

    def test_frozen(self):
        sel = DesignSelection()
        with pytest.raises(ValidationError):
            sel.metal_type = MetalType.SILVER

    def test_payload_uses_camel_case(self):
        payload = DesignSelection(gem_type="ruby").to_payload()
        assert payload["gemType"] == "ruby"
        assert payload["engravingText"] == ""
        assert payload["jewelryType"] == "ring"


class TestCoerceSelection:

    def test_passes_through_selection(self):
        sel = DesignSelection(metal_type="silver")
        assert coerce_selection(sel) is sel

    def test_none_gives_default(self):
        assert coerce_selection(None) == DEFAULT_SELECTION

    def test_clamps_and_defaults(self):
        sel = coerce_selection(
            {
                "jewelryType": "tiara",
                "metal_type": " Platinum ",
                "gemType": "diamond",
                "gemSize": 0.1,
                "gemCount": 12,
                "ringSize": "2",
                "shape": "oval",
                "engravingText": "a" * 30,
                "extra": True,
            }
        )
        assert sel.jewelry_type == JewelryType.RING
        assert sel.metal_type == MetalType.PLATINUM
        assert sel.gem_size == 0.5
        assert sel.gem_count == 7
        assert sel.ring_size == 4.0
        assert sel.shape == "round"
        assert sel.engraving_text == "a" * 20

    def test_garbage_numbers_fall_back(self):
        sel = coerce_selection({"gemSize": "big", "gemCount": None, "ringSize": float("nan")})
        assert sel.gem_size == 1.0
        assert sel.gem_count == 1
        assert sel.ring_size == 7.0


def test_extraction_result_rejects_bad_confidence():
    with pytest.raises(ValidationError):
        ExtractionResult(selection=DesignSelection(), confidence={"shape": 1.5})
    with pytest.raises(ValidationError):
        ExtractionResult(selection=DesignSelection(), confidence={"colour": 0.5})
