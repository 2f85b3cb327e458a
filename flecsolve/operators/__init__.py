"""Operators that act on vectors: policies, shells, handles, storage and factories."""