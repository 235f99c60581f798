"""
Princípio da Segregação de Interfaces (ISP).

Interfaces devem ser específicas e direcionadas a necessidades concretas, sem
forçar as classes a implementar métodos de que não precisam.

Aqui os comportamentos das aves são separados em várias interfaces, e cada
ave implementa apenas as que são relevantes para ela.
"""

from abc import ABC, abstractmethod
from typing import FrozenSet


# =====================================================================
# Antes: uma interface "gorda" com todos os comportamentos
# =====================================================================

class BirdActions(ABC):
    """Obriga toda ave a voar, nadar e andar."""

    @abstractmethod
    def fly(self):
        pass

    @abstractmethod
    def swim(self):
        pass

    @abstractmethod
    def walk(self):
        pass


class ForcedPenguin(BirdActions):
    """Pinguim obrigado a implementar fly() mesmo sem voar."""

    def fly(self):
        raise NotImplementedError("O pinguim não voa, mas foi obrigado a implementar fly()")

    def swim(self):
        print("O pinguim está nadando")

    def walk(self):
        print("O pinguim está andando")


# =====================================================================
# Depois: uma interface por comportamento
# =====================================================================

class Flyable(ABC):
    """Comportamento de voo. Apenas aves que voam implementam."""

    @abstractmethod
    def fly(self):
        pass


class Swimmable(ABC):
    """Comportamento de natação. Apenas aves que nadam implementam."""

    @abstractmethod
    def swim(self):
        pass


class Walkable(ABC):
    """Comportamento de caminhada. Apenas aves que andam implementam."""

    @abstractmethod
    def walk(self):
        pass


CAPABILITIES = {
    "fly": Flyable,
    "swim": Swimmable,
    "walk": Walkable,
}


class Sparrow(Flyable, Walkable):
    """Pardal: voa e anda."""

    def fly(self):
        print("O pardal está voando")

    def walk(self):
        print("O pardal está andando")


class Penguin(Swimmable, Walkable):
    """Pinguim: nada e anda, mas não implementa Flyable."""

    def swim(self):
        print("O pinguim está nadando")

    def walk(self):
        print("O pinguim está andando")


class Ostrich(Walkable):
    """Avestruz: apenas anda."""

    def walk(self):
        print("O avestruz está andando")


BIRDS = (Sparrow, Penguin, Ostrich)


def capabilities_of(bird) -> FrozenSet[str]:
    """
    Enumera as capacidades que uma ave (classe ou instância) declara.

    Returns:
        FrozenSet[str]: Subconjunto de {"fly", "swim", "walk"}
    """
    bird_type = bird if isinstance(bird, type) else type(bird)
    return frozenset(
        name for name, capability in CAPABILITIES.items()
        if issubclass(bird_type, capability)
    )


def main():
    """Demonstra aves que implementam apenas os comportamentos que têm."""
    sparrow = Sparrow()
    sparrow.fly()
    sparrow.walk()

    penguin = Penguin()
    penguin.swim()
    penguin.walk()

    ostrich = Ostrich()
    ostrich.walk()


if __name__ == "__main__":
    main()
