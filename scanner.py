import logging
from typing import Iterator, Optional

from errors import InvalidCharacterError
from grammar import TOKEN_FOR_CLASS, CharacterClass, Integer, Token

logger = logging.getLogger(__name__)

CHARACTER_CLASSES = {
    " ": CharacterClass.WHITESPACE,
    "-": CharacterClass.MINUS,
    "+": CharacterClass.PLUS,
    "*": CharacterClass.MUL,
    "/": CharacterClass.DIV,
    "\n": CharacterClass.LINE_END,
}


def classify(char: str) -> Optional[CharacterClass]:
    # str.isdigit() would also accept non-ASCII digits
    if "0" <= char <= "9":
        return CharacterClass.DIGIT
    return CHARACTER_CLASSES.get(char)


def scan(input_string: str) -> Iterator[Token]:
    current_index = 0
    end = len(input_string)

    while current_index != end:
        char_class = classify(input_string[current_index])
        if char_class is None:
            raise InvalidCharacterError(input_string[current_index], current_index)

        if char_class == CharacterClass.WHITESPACE:
            current_index += 1
            continue

        if char_class != CharacterClass.DIGIT:
            token = TOKEN_FOR_CLASS[char_class]
            logger.debug("token %r at %d", token, current_index)
            yield token
            if char_class == CharacterClass.LINE_END:
                return
            current_index += 1
            continue

        number_end = current_index + 1
        while number_end != end and classify(input_string[number_end]) == CharacterClass.DIGIT:
            number_end += 1
        token = Integer(input_string[current_index:number_end])
        logger.debug("token %r at %d", token, current_index)
        yield token
        current_index = number_end


if __name__ == "__main__":
    for tok in scan("4 /2 * 5 + 5 - 3\n"):
        print(tok)
