"""Pizza catalog: a priced, described subject with topping decorators.

Every topping touches both ``cost`` and ``description``. Cost additions
commute, but description suffixes appear in wrapping order, so two toppings
never form an order-independent pair.
"""
from decorum.application.decorators import decorator_variant, subject_kind
from decorum.domain.base.value_objects import AttributeKind
from decorum.domain.decorator import Add, Append, DecoratorWrapper, decorator_factory
from decorum.domain.subject import BaseSubject, SubjectSchema, create_subject

PIZZA_SCHEMA = SubjectSchema(
    kind="pizza",
    attributes={"cost": AttributeKind.NUMERIC, "description": AttributeKind.TEXT},
)


@subject_kind(PIZZA_SCHEMA)
def make_pizza(cost: float, description: str) -> BaseSubject:
    return create_subject(PIZZA_SCHEMA, cost=cost, description=description)


@decorator_variant("pizza")
class Cheese(DecoratorWrapper):
    name = "cheese"
    transforms = {"cost": Add(0.10), "description": Append(" with cheese")}


@decorator_variant("pizza")
class Pepperoni(DecoratorWrapper):
    name = "pepperoni"
    transforms = {"cost": Add(0.25), "description": Append(" with pepperoni")}


@decorator_variant("pizza")
class Olives(DecoratorWrapper):
    name = "olives"
    transforms = {"cost": Add(0.15), "description": Append(" with olives")}


cheese = decorator_factory(Cheese)
pepperoni = decorator_factory(Pepperoni)
olives = decorator_factory(Olives)
