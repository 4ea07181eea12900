import dataclasses
import enum
import json


class CharacterClass(enum.Enum):
    DIGIT = "digit"
    WHITESPACE = "whitespace"
    MINUS = "-"
    PLUS = "+"
    MUL = "*"
    DIV = "/"
    LINE_END = "line end"


class TokenJSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, Token):
            return {"kind": type(o).__name__, "image": o.image}
        return super().default(o)


@dataclasses.dataclass(frozen=True)
class Token:
    image: str


@dataclasses.dataclass(frozen=True)
class Integer(Token):
    pass


@dataclasses.dataclass(frozen=True)
class Operator(Token):
    pass


@dataclasses.dataclass(frozen=True)
class Plus(Operator):
    image: str = "+"


@dataclasses.dataclass(frozen=True)
class Minus(Operator):
    image: str = "-"


@dataclasses.dataclass(frozen=True)
class Mul(Operator):
    image: str = "*"


@dataclasses.dataclass(frozen=True)
class Div(Operator):
    image: str = "/"


@dataclasses.dataclass(frozen=True)
class EndOfInput(Token):
    image: str = "\n"


PLUS: Plus = Plus()
MINUS: Minus = Minus()
MUL: Mul = Mul()
DIV: Div = Div()
EOF: EndOfInput = EndOfInput()

# single-character classes map straight to their token
TOKEN_FOR_CLASS = {
    CharacterClass.PLUS: PLUS,
    CharacterClass.MINUS: MINUS,
    CharacterClass.MUL: MUL,
    CharacterClass.DIV: DIV,
    CharacterClass.LINE_END: EOF,
}


def to_json(tokens) -> str:
    return json.dumps(list(tokens), cls=TokenJSONEncoder)
