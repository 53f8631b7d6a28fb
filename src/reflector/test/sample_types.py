#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""Struct shapes shared by the reflector tests."""

import threading
from dataclasses import dataclass, field
from typing import Annotated, ClassVar, Optional, Tuple

from reflector import Embed, Tag, pointer_receiver


class Address:
    street: Annotated[str, Tag('tag:"be" tag2:"1,2,3"')]
    number: Annotated[int, Tag('tag:"bi"')]

    def __init__(self, street="", number=0):
        self.street = street
        self.number = number


class Person:
    name: Annotated[str, Tag('tag:"bu"')]
    address: Embed[Address]

    def __init__(self, name="", address=None):
        self.name = name
        self.address = address if address is not None else Address()

    def add(self, a: int, b: int, c: int) -> int:
        return a + b + c

    @pointer_receiver
    def substract(self, a: int, b: int) -> int:
        return a - b

    def returns_error(self, err: bool) -> Tuple[str, Optional[int], Optional[Exception]]:
        i = 2
        if err:
            return "", None, ValueError("Error here!")
        return "jen", i, None

    def hi(self, name: str) -> str:
        return f"Hi {name} my name is {self.name}"


class CustomType(int):

    def method1(self) -> str:
        return "yep"

    @pointer_receiver
    def method2(self) -> int:
        return 7


class Company:
    address: Embed[Address]
    number: Annotated[int, Tag('tag:"bi"')]

    def __init__(self, number=0):
        self.address = Address()
        self.number = number


class Geo:
    lat: float
    lon: float

    def __init__(self, lat=0.0, lon=0.0):
        self.lat = lat
        self.lon = lon


class Location:
    city: str
    geo: Embed[Geo]

    def __init__(self, city=""):
        self.city = city
        self.geo = Geo()


class Venue:
    title: str
    location: Embed[Location]
    capacity: int

    def __init__(self, title="", capacity=0):
        self.title = title
        self.location = Location()
        self.capacity = capacity


class Node:
    label: str
    inner: Embed["Node"]


class Engine:
    power: int

    def __init__(self, power=0):
        self.power = power

    def describe(self) -> str:
        return f"{self.power}hp"

    def start(self) -> str:
        return "engine"

    @pointer_receiver
    def tune(self, delta: int) -> None:
        self.power += delta

    def bump(self) -> int:
        self.power += 1
        return self.power


class Car:
    model: str
    engine: Embed[Engine]

    def __init__(self, model="", engine=None):
        self.model = model
        self.engine = engine

    def start(self) -> str:
        return "car"


@dataclass(frozen=True)
class Point:
    x: int = field(default=0, metadata={"tag": 'json:"x,omitempty"'})
    y: int = 0


@dataclass
class Base:
    id: int = 0


@dataclass
class Derived(Base):
    kind: ClassVar[str] = "derived"
    label: str = ""


class Account:
    owner: str
    _balance: int

    def __init__(self, owner="", balance=0):
        self.owner = owner
        self._balance = balance


class Holder:
    name: str

    def __init__(self, name=""):
        self.name = name
        self.lock = threading.Lock()


class Calc:

    def total(self, *nums: int) -> int:
        return sum(nums)

    def scale(self, x: float, factor: float = 2.0) -> float:
        return x * factor

    def nothing(self) -> None:
        pass

    def loose(self, x):
        return x

    def pair(self) -> Tuple[int, str]:
        return 1, "one"

    def broken_pair(self) -> Tuple[int, str]:
        return 1

    def single(self) -> Tuple[int]:
        return (5,)

    def only_err(self, fail: bool) -> Tuple[Optional[Exception]]:
        return (ValueError("bad") if fail else None,)

    def opaque(self) -> Tuple:
        return 1, 2

    def fails(self) -> int:
        raise RuntimeError("boom")

    def _hidden(self):
        return "hidden"

    @staticmethod
    def helper():
        return "static"
