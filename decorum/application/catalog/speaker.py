"""Speaker catalog: a numeric-only subject with boost decorators."""
from decorum.application.decorators import decorator_variant, subject_kind
from decorum.domain.base.value_objects import AttributeKind
from decorum.domain.decorator import Add, DecoratorWrapper, Scale, decorator_factory
from decorum.domain.subject import BaseSubject, SubjectSchema, create_subject

SPEAKER_SCHEMA = SubjectSchema(
    kind="speaker",
    attributes={"power": AttributeKind.NUMERIC, "bass": AttributeKind.NUMERIC},
)

BASS_BOOST = 5.0
POWER_BOOST = 10.0


@subject_kind(SPEAKER_SCHEMA)
def make_speaker(power: float, bass: float) -> BaseSubject:
    return create_subject(SPEAKER_SCHEMA, power=power, bass=bass)


@decorator_variant("speaker")
class BassBoost(DecoratorWrapper):
    name = "bass_boost"
    transforms = {"bass": Add(BASS_BOOST)}


@decorator_variant("speaker")
class PowerBoost(DecoratorWrapper):
    name = "power_boost"
    transforms = {"power": Add(POWER_BOOST)}


@decorator_variant("speaker")
class PowerDoubler(DecoratorWrapper):
    """Doubles power; shares ``power`` with PowerBoost, so their order matters."""

    name = "power_doubler"
    transforms = {"power": Scale(2.0)}


bass_boost = decorator_factory(BassBoost)
power_boost = decorator_factory(PowerBoost)
power_doubler = decorator_factory(PowerDoubler)
