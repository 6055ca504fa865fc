from goose_quotes.models.goose import Goose

__all__ = ["Goose"]
