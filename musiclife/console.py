"""Validated line-oriented input and output for the game."""

import re
import sys

_INT_PATTERN = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _clean(text):
    return text.strip(" \t")


class Console:
    """Reads validated answers from a text stream and writes prompts to another."""

    def __init__(self, stdin=None, stdout=None):
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def write(self, text):
        """Write text to the output stream."""
        self._out.write(text)
        self._out.flush()

    def read_line(self):
        """Return the next input line without its line ending; raise EOFError at end."""
        line = self._in.readline()
        if line == "":
            raise EOFError("Nu mai sunt date de citit.")
        return line.rstrip("\r\n")

    def expect(self, options):
        """Keep reading until one of the options is entered."""
        self.choose(options)

    def choose(self, options):
        """Keep reading until one of the options is entered and return it."""
        options = list(options)
        while True:
            answer = _clean(self.read_line())
            if not answer:
                self.write("Inputul dat este gol, insa nu poate fi gol.\n")
                continue
            if answer in options:
                return answer
            listed = "".join(f"{option} " for option in options)
            self.write(f"Input invalid. Singurele optiuni valide sunt: {listed}\n")

    def read_int(self, low, high):
        """Keep reading until a whole number between low and high is entered."""
        while True:
            try:
                line = self.read_line()
            except EOFError:
                self.write("Nu mai sunt date de citit.\n")
                raise
            answer = _clean(line)
            if not answer:
                self.write("Inputul nu poate fi gol, trebuie sa inserezi un numar.\n")
                continue
            if not _INT_PATTERN.fullmatch(answer):
                self.write("Input invalid. Insereaza un numar valid!\n")
                continue
            value = int(answer)
            if not _INT_MIN <= value <= _INT_MAX:
                self.write("Input invalid. Insereaza un numar valid!\n")
                continue
            if value < low or value > high:
                self.write(f"Numarul trebuie sa fie cuprins intre {low} si {high}.\n")
                continue
            return value