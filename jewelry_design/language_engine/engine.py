from __future__ import annotations

from typing import Any, List, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from ..selection.normalize import coerce_selection
from ..selection.types import DesignSelection, GemType, JewelryType
from . import phrases

PriceLike = Union[str, float, int]


class DescriptionInput(BaseModel):
    selection: DesignSelection
    price: str

    model_config = ConfigDict(frozen=True)


class DescriptionOutput(BaseModel):
    text: str
    paragraphs: List[str] = Field(default_factory=list)


def format_price(price: PriceLike) -> str:
    if isinstance(price, str):
        return price
    return f"{float(price):.2f}"


def format_size(value: float) -> str:
    """Ring sizes print like the UI shows them: 7, 7.5."""
    return f"{value:g}"


def gem_plural(gem: GemType) -> str:
    if gem.value.endswith("y"):
        return gem.value[:-1] + "ies"
    return gem.value + "s"


class DesignDescriber:
    """
    Stateless, deterministic prose generator for a DesignSelection.
    Same selection and price always produce byte-identical text.
    """

    def generate(self, input_data: DescriptionInput) -> DescriptionOutput:
        selection = input_data.selection
        paragraphs = [
            self._opening(selection),
            self._type_paragraph(selection),
        ]
        if selection.engraving_text:
            paragraphs.append(
                f'Personalized with the engraving: "{selection.engraving_text}".'
            )
        paragraphs.append(f"Estimated value: ${input_data.price}.")
        return DescriptionOutput(text=self._assemble(paragraphs), paragraphs=paragraphs)

    def describe(
        self, selection: Union[DesignSelection, Mapping[str, Any]], price: PriceLike
    ) -> str:
        input_data = DescriptionInput(
            selection=coerce_selection(selection), price=format_price(price)
        )
        return self.generate(input_data).text

    # --- phrase lookups ---

    def _metal(self, selection: DesignSelection) -> str:
        return phrases.METAL_PHRASES.get(selection.metal_type, phrases.UNKNOWN_METAL_PHRASE)

    def _shape(self, selection: DesignSelection) -> str:
        if selection.has_custom_shape:
            return phrases.CUSTOM_SHAPE_PHRASE
        return phrases.SHAPE_PHRASES.get(selection.shape, phrases.UNKNOWN_SHAPE_PHRASE)

    def _gem_character(self, gem: GemType) -> str:
        color = phrases.GEM_COLOR_PHRASES.get(gem, phrases.UNKNOWN_GEM_COLOR_PHRASE)
        quality = phrases.GEM_QUALITY_PHRASES.get(gem, phrases.UNKNOWN_GEM_QUALITY_PHRASE)
        return f"{color} {gem.value} of {quality}"

    # --- paragraphs ---

    def _opening(self, selection: DesignSelection) -> str:
        text = f"Exquisite {selection.jewelry_type.value} crafted from {self._metal(selection)}"
        gem = selection.gem_type
        if gem is not None:
            multiple = selection.gem_count > 1
            count = f"{selection.gem_count} " if multiple else ""
            name = gem_plural(gem) if multiple else gem.value
            each = " each" if multiple else ""
            text += f" featuring {count}{self._shape(selection)} {name}"
            text += f" ({selection.gem_size:.1f} ct{each})"
        else:
            text += f" with a {self._shape(selection)} design"
        return text + "."

    def _type_paragraph(self, selection: DesignSelection) -> str:
        metal = self._metal(selection)
        shape = self._shape(selection)
        gem = selection.gem_type
        multiple = selection.gem_count > 1
        pronoun = "their" if multiple else "its"
        kind = selection.jewelry_type

        if kind == JewelryType.RING:
            intro = (
                f"This ring features a band crafted from {metal} and is available "
                f"in size {format_size(selection.ring_size)}. "
            )
            if gem is None:
                return intro + f"The {shape} design offers a timeless appeal."
            subject = f"{gem_plural(gem)} are" if multiple else f"{gem.value} is"
            return intro + (
                f"The {shape} {subject} meticulously set to showcase "
                f"{pronoun} {self._gem_character(gem)}."
            )

        if kind == JewelryType.NECKLACE:
            intro = f"This necklace features a delicate chain crafted from {metal}. "
            if gem is None:
                return intro + f"The {shape} pendant creates an elegant focal point."
            verb = " and accents are" if multiple else " is"
            return intro + (
                f"The {shape} {gem.value} pendant{verb} carefully positioned to "
                f"highlight {pronoun} {self._gem_character(gem)}."
            )

        if kind == JewelryType.EARRINGS:
            intro = f"These earrings are meticulously crafted from {metal}. "
            if gem is None:
                return intro + f"Their {shape} design offers a sophisticated finish."
            stones = f"multiple {shape} {gem_plural(gem)}" if multiple else f"a {shape} {gem.value}"
            verb = "capture" if multiple else "captures"
            return intro + (
                f"Each earring showcases {stones} that {verb} the "
                f"{self._gem_character(gem)}."
            )

        if kind == JewelryType.BRACELET:
            intro = f"This bracelet is expertly crafted from {metal}. "
            if gem is None:
                return intro + (
                    f"The {shape} elements create a striking pattern along its length."
                )
            subject = f"{gem_plural(gem)} are" if multiple else f"{gem.value} is"
            return intro + (
                f"The {shape} {subject} artfully arranged to showcase "
                f"{pronoun} {self._gem_character(gem)}."
            )

        return f"This piece is expertly crafted from {metal}."

    def _assemble(self, paragraphs: List[str]) -> str:
        return "\n\n".join(paragraphs)


def describe(selection: Union[DesignSelection, Mapping[str, Any]], price: PriceLike) -> str:
    return DesignDescriber().describe(selection, price)
