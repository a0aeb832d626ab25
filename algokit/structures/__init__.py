"""Linked lists, binary search tree and hash table."""