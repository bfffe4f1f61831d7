class SimilarityError(Exception):
    """Base error for the comparison workflows around the engine."""


class ConfigError(SimilarityError):
    pass


class NoCandidatesError(SimilarityError):
    pass
