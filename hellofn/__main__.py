"""
Invokable Module for CLI

python -m hellofn
"""

from hellofn.cli.main import cli  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    # prog_name is pinned so the help text says "hellofn" instead of "__main__"
    cli(prog_name="hellofn")
