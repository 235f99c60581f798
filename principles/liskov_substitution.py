"""
Princípio da Substituição de Liskov (LSP).

"Os objetos de uma classe derivada devem ser substituíveis por objetos da
classe base sem alterar a correção do programa."

Uma subclasse deve poder ser usada no lugar da superclasse sem efeitos
colaterais indesejados ou falhas de comportamento.
"""

from abc import ABC, abstractmethod


class UnsupportedOperationError(NotImplementedError):
    """A operação não é suportada pelo tipo que a recebeu."""


# =====================================================================
# Exemplo 1: violando o LSP
#
# Bird define fly() para todos os pássaros; Ostrich, que não voa, troca o
# comportamento por uma exceção e deixa de ser substituível por Bird.
# =====================================================================

class Bird:
    def fly(self):
        print("O pássaro está voando")


class Ostrich(Bird):
    def fly(self):
        raise UnsupportedOperationError("O avestruz não pode voar!")


# =====================================================================
# Exemplo 2: respeitando o LSP
#
# BirdBase é abstrata e fly() não tem implementação padrão; cada subtipo
# fornece um comportamento válido que nunca falha.
# =====================================================================

class BirdBase(ABC):
    @abstractmethod
    def fly(self):
        pass


class Sparrow(BirdBase):
    def fly(self):
        print("O pardal está voando")


class OstrichSubstitute(BirdBase):
    def fly(self):
        print("O avestruz não pode voar")


def make_fly(bird):
    """Chama fly() sem nenhum tratamento especial por subtipo."""
    bird.fly()


def main():
    """Demonstra a substituição incorreta e a correta."""
    make_fly(Bird())

    try:
        make_fly(Ostrich())
    except UnsupportedOperationError as e:
        print(f"Erro: {e}")

    for bird in (Sparrow(), OstrichSubstitute()):
        make_fly(bird)


if __name__ == "__main__":
    main()
