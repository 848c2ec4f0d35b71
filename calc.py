#!/usr/bin/python3
# Simples launcher para avaliar uma expressão pela linha de comando, Ex: ./calc.py 3 + 4 * 2
import sys

from exprtree.cli import main

if __name__ == "__main__":
    sys.exit(main())
