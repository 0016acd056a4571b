from mtg_card_stats.models.card_record import CardRecord

__all__ = ["CardRecord"]
