import slugline.util as util

import copy

# the saved/loaded variables of one class. each variable is stored in the
# config text as a "Name:value" line.
class Vars:
    def __init__(self):
        # all variables, in the order they were added
        self.cvars = []

        # variables with a valid range
        self.numeric = []

    def add(self, var):
        self.cvars.append(var)

        if isinstance(var, NumericVar):
            self.numeric.append(var)

    def addBool(self, name, defVal, key):
        self.add(BoolVar(name, defVal, key))

    def addFloat(self, name, defVal, key, minVal, maxVal):
        self.add(FloatVar(name, defVal, key, minVal, maxVal))

    def addInt(self, name, defVal, key, minVal, maxVal):
        self.add(IntVar(name, defVal, key, minVal, maxVal))

    def setDefaults(self, obj):
        for it in self.cvars:
            setattr(obj, it.name, copy.deepcopy(it.defVal))

    # clamp all numeric variables of 'obj' to their valid ranges.
    def clamp(self, obj):
        for it in self.numeric:
            util.clampObj(obj, it.name, it.minVal, it.maxVal)

    # parse config text 's' into a { key : value } dictionary. lines
    # without a ':' are ignored.
    @staticmethod
    def parse(s):
        vals = {}

        for line in util.fixNL(str(s)).split("\n"):
            key, sep, v = line.partition(":")

            if sep:
                vals[key.strip()] = v.strip()

        return vals

    def save(self, prefix, obj):
        return "".join([it.toStr(getattr(obj, it.name), prefix + it.key)
                        for it in self.cvars])

    # set variables of 'obj' from 'vals', as returned by parse(). used
    # values are removed from 'vals', so anything left over afterwards is
    # unknown.
    def load(self, vals, prefix, obj):
        for it in self.cvars:
            key = prefix + it.key

            if key in vals:
                setattr(obj, it.name, it.fromStr(vals.pop(key)))

class ConfVar:
    # 'name' is the attribute name, 'key' the name in config text.
    def __init__(self, name, defVal, key):
        self.name = name
        self.defVal = defVal
        self.key = key

    def toStr(self, val, key):
        return "%s:%s\n" % (key, self.fmt(val))

class BoolVar(ConfVar):
    def fmt(self, val):
        return str(bool(val))

    def fromStr(self, val):
        return val == "True"

class NumericVar(ConfVar):
    def __init__(self, name, defVal, key, minVal, maxVal):
        ConfVar.__init__(self, name, defVal, key)
        self.minVal = minVal
        self.maxVal = maxVal

class FloatVar(NumericVar):
    def fmt(self, val):
        return "%.2f" % val

    def fromStr(self, val):
        return util.str2float(val, self.defVal, self.minVal, self.maxVal)

class IntVar(NumericVar):
    def fmt(self, val):
        return "%d" % val

    def fromStr(self, val):
        return util.str2int(val, self.defVal, self.minVal, self.maxVal)
