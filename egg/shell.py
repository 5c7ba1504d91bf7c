"""Interactive mode for the egg interpreter. Uses cmd as backend."""

import cmd
import logging

from egg import config
from egg.debug_utils.pprint import COLOR_ERROR, RESET, colorize, format_value
from egg.errors import EggError, EggIncompleteInput
from egg.interpreter import Interpreter

logger = logging.getLogger(__name__)


class Shell(cmd.Cmd):
    """Egg interpreter shell."""
    intro = "Egg interpreter\nType 'help' for more information, 'exit' or Ctrl-D to quit."
    secondary_prompt = ". "  # used while an expression spans several lines

    def __init__(self, interpreter=None, color=False, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.interp = interpreter if interpreter is not None else Interpreter()
        self.color = color
        self.primary_prompt = config.get_prompt()
        self.prompt = self.primary_prompt

        self._pending = ""

    def _show(self, value):
        print(colorize(value) if self.color else format_value(value), file=self.stdout)

    def _error(self, error):
        text = f"{type(error).__name__}: {error}"
        if self.color:
            text = f"{COLOR_ERROR}{text}{RESET}"
        print(text, file=self.stdout)

    commands = ("help", "exit", "reset", "EOF")

    def onecmd(self, line):
        # Only a bare command name is a command; `exit(1)` or `?` is Egg source.
        # Continuation lines are always source, except EOF which ends the shell
        name = line.strip()
        if name == "EOF" or (name in self.commands and not self._pending):
            return super().onecmd(name)
        return self.default(line)

    def default(self, line):
        """Evaluates an Egg expression, buffering lines until it is complete."""
        source = f"{self._pending}\n{line}" if self._pending else line
        if not source.strip():
            return
        try:
            value = self.interp.eval(source)
        except EggIncompleteInput:
            self._pending = source
            self.prompt = self.secondary_prompt
            return
        except EggError as error:  # cmd.Cmd would exit on an uncaught exception
            logger.debug("evaluation failed", exc_info=True)
            self._error(error)
        except RecursionError:
            self._error(EggError("maximum recursion depth exceeded"))
        else:
            self._show(value)
        self._pending = ""
        self.prompt = self.primary_prompt

    def do_reset(self, arg):
        """Forgets every definition made in this session."""
        self.interp.reset()
        print("Session reset.", file=self.stdout)

    def do_help(self, arg):
        """Prints a short introduction to the language."""
        print("Egg is a small expression language. Everything is an expression:\n"
              "numbers, \"strings\", words, and applications written f(a, b).\n\n"
              "Special forms: if, while, do, define, set, fun.\n"
              "Builtins: + - * / == < > print array length element true false.\n\n"
              "Try: do(define(sq, fun(x, *(x, x))), sq(12))\n"
              "Commands: reset (forget definitions), exit.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
