"""Tokenize Owl markup in 3 lines — zero config, zero deps."""

from owl import tokenize

for token in tokenize('page {\n  title; "Hello\\tOwl"\n}'):
    print(token)
