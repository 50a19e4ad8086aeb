"""Points and a DCEL, binary search and 2-3 trees, word ladders, a sentiment
hash table, a jug puzzle solver and a party battle game."""

__version__ = "0.1.0"