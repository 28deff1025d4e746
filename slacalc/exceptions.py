# slacalc/exceptions.py

class SlaCalcError(Exception):
    pass


class TermError(SlaCalcError):
    pass


class EmptyOperandError(TermError):
    pass


class InvalidProbability(SlaCalcError, ValueError):
    pass


class TopologyError(SlaCalcError, ValueError):
    pass
