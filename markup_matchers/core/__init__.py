"""Parsing and inspection of HTML and JSX markup."""
