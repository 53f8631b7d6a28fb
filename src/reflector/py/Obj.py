#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

class Obj:
    """Base class for all reflector objects"""

    def equals(self, that):
        return self is that

    def to_str(self):
        return f"{type(self).__name__}@{id(self):x}"

    def __str__(self):
        return self.to_str()

    def __repr__(self):
        return self.to_str()
