"""
Simple Action Chain Example

This example demonstrates the basic builder pattern:
1. Create custom middleware
2. Declare a stack, merging a reusable sub-stack
3. Run it against an environment

Run: python examples/01-simple-chain/main.py
"""

from actionstack import ActionHalt, Builder, Environment, Middleware
from actionstack.config import configure_logging

# =============================================================================
# Custom Middleware
# =============================================================================


class Uppercase(Middleware):
    """Uppercases env["text"]."""

    def call(self, env):
        env["text"] = env["text"].upper()
        env.record_unit(self.name)
        return self.app(env)


class WordCount(Middleware):
    """Counts words in env["text"]."""

    def call(self, env):
        env["word_count"] = len(env["text"].split())
        env.record_unit(self.name)
        return self.app(env)


class RequireText(Middleware):
    """Halts the chain when there is no text to work on."""

    def call(self, env):
        if not env.get("text"):
            raise ActionHalt("no text given")
        return self.app(env)


class Suffix(Middleware):
    """Appends a fixed suffix, given at registration time."""

    def __init__(self, app, env, suffix):
        super().__init__(app, env)
        self.suffix = suffix

    def call(self, env):
        env["text"] = f"{env['text']}{self.suffix}"
        env.record_unit(self.name)
        return self.app(env)


# =============================================================================
# Main
# =============================================================================


def main():
    configure_logging()

    text_steps = Builder(lambda b: b.use(Uppercase).use(WordCount))

    builder = Builder()
    builder.use(RequireText)
    builder.use(text_steps)
    builder.use(Suffix, "!")

    print(f"Builder: {builder}")
    print()

    env = Environment(data={"text": "Hello world from actionstack"})
    builder.call(env)

    print(f"Text: {env['text']}")
    print(f"Word count: {env['word_count']}")
    print(f"Units: {env.unit_log}")
    print()

    empty = Environment()
    builder.call(empty)
    print(f"Halted: {empty.halted} ({empty.halt_record.reason})")


if __name__ == "__main__":
    main()
