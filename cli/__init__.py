"""medalwiki command-line interface."""
