# solid_principles/principles/interface_segregation.py
"""
Interface Segregation Principle.

Clients should not be forced to depend on methods they do not use.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from solid_principles.core import Illustration, PrincipleExample, Transcript

# =============================================================================
# Violating
# =============================================================================


class Worker:
    """One fat interface for every kind of worker."""

    def work(self) -> str:
        raise NotImplementedError

    def eat(self) -> str:
        raise NotImplementedError


class Human(Worker):
    def work(self) -> str:
        return "Human is working"

    def eat(self) -> str:
        return "Human is eating lunch"


class Robot(Worker):
    def work(self) -> str:
        return "Robot is working"

    def eat(self) -> str:
        raise NotImplementedError("Robots don't eat")


def run_violation(out: Transcript) -> None:
    for worker in (Human(), Robot()):
        out.write(worker.work())
        try:
            out.write(worker.eat())
        except NotImplementedError as e:
            out.write(f"{type(worker).__name__}.eat() failed: {e}")


# =============================================================================
# Adhering
# =============================================================================


class Workable(ABC):
    @abstractmethod
    def work(self) -> str:
        ...


class Eatable(ABC):
    @abstractmethod
    def eat(self) -> str:
        ...


class HumanWorker(Workable, Eatable):
    def work(self) -> str:
        return "Human is working"

    def eat(self) -> str:
        return "Human is eating lunch"


class RobotWorker(Workable):
    def work(self) -> str:
        return "Robot is working"


def start_shift(workers: List[Workable]) -> List[str]:
    return [worker.work() for worker in workers]


def lunch_break(eaters: List[Eatable]) -> List[str]:
    return [eater.eat() for eater in eaters]


def run_adherence(out: Transcript) -> None:
    human, robot = HumanWorker(), RobotWorker()
    for line in start_shift([human, robot]):
        out.write(line)
    for line in lunch_break([human]):
        out.write(line)


EXAMPLE = PrincipleExample(
    key="interface_segregation",
    letter="I",
    title="Interface Segregation Principle",
    summary=(
        "No client should be forced to depend on methods it does not use. Prefer "
        "several small, role-specific interfaces over one general-purpose one."
    ),
    violation=Illustration(
        description="Robot must implement eat() because Worker demands it, and can only raise.",
        members=(Worker, Human, Robot),
        driver=run_violation,
    ),
    adherence=Illustration(
        description="Working and eating are separate capabilities; a robot only takes the one it has.",
        members=(Workable, Eatable, HumanWorker, RobotWorker, start_shift, lunch_break),
        driver=run_adherence,
    ),
    aliases=("isp", "interface-segregation"),
)
