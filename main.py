#!/usr/bin/env python
"""CLI for Blog Reader."""

from blog_reader.cli import main

if __name__ == "__main__":
    main()
