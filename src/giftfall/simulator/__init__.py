"""Desktop pygame host for GIFTFALL."""
