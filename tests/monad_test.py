from abc import ABC, abstractmethod


class FunctorTest(ABC):
    @abstractmethod
    def test_equality(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_inequality(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_identity_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_composition_law(self, *args):
        raise NotImplementedError()


class MonadTest(FunctorTest, ABC):
    """
    Laws every effect bundled with mlist must obey, since the
    `MList` operations rely on them to reassociate ``and_then`` chains
    """
    @abstractmethod
    def test_right_identity_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_left_identity_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_associativity_law(self, *args):
        raise NotImplementedError()
