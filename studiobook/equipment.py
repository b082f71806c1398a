"""Studio equipment and instruments that rooms can hold."""

from __future__ import annotations

from .ids import generate_uuid_v4


class Equipment:
    """A piece of studio equipment with a name and a description."""

    name: str = ""
    description: str = ""

    def __init__(self) -> None:
        self.id = ""

    @property
    def information(self) -> str:
        """Return ``"<name> | <description>"``."""
        return f"{self.name} | {self.description}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


class BasicSoundSystem(Equipment):
    name = "Basic sound system"
    description = "Basic sound system"


class AdvancedSoundSystem(BasicSoundSystem):
    name = "Advanced Sound System"
    description = "Advanced Sound System"


class BasicLightingSystem(Equipment):
    name = "Basic lighting system"
    description = "A basic lighting system"


class AdvancedLightingSystem(BasicLightingSystem):
    name = "Advanced Lighting System"
    description = "Advanced Lighting System"


class Stage(Equipment):
    name = "Stage"
    description = "10x10m stage meant to mimic playing on a live stage"


class Instrument(Equipment):
    """Equipment that carries its own unique identifier."""

    def __init__(self) -> None:
        super().__init__()
        self.id = generate_uuid_v4()


class Drums(Instrument):
    """A drum kit described by the number of each kind of piece."""

    bass_drums: int = 0
    snare_drums: int = 0
    toms: int = 0
    cymbals: int = 0


class SmallDrums(Drums):
    bass_drums = 1
    snare_drums = 1
    toms = 2
    cymbals = 3
    name = "Small drum kit"
    description = (
        f"This is small hobbyist drum kit with {bass_drums} bass drum, "
        f"{snare_drums} snare drums, {toms} tom drums and {cymbals} symbals"
    )


class StandardDrums(Drums):
    bass_drums = 2
    snare_drums = 1
    toms = 5
    cymbals = 5
    name = "Standard drum kit"
    description = (
        f"This is standard all-purpose drum kit with {bass_drums} bass drum, "
        f"{snare_drums} snare drums, {toms} tom drums and {cymbals} symbals"
    )


class Microphone(Instrument):
    name = "Microphone"
    description = "JBL PMB100 Wired dynamic vocal mic"


class Piano(Instrument):
    name = "Piano"
    description = "Standard 88 key piano"


class ElectricGuitarAmp(Instrument):
    name = "Guitar amplifier"
    description = "Guitar amplifier"


class ElectricBassAmp(Instrument):
    name = "Bass amplifier"
    description = "Bass amplifier"


class Synthesizer(Instrument):
    name = "Synthesizer"
    description = "66-key MIDI synthesizer with dynamic effects"