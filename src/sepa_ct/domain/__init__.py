"""Domain layer of the SEPA credit transfer builder."""
