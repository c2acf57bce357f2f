class BaseVec2Error(Exception):
    pass


class InvalidVectorError(BaseVec2Error, ValueError):
    pass
