"""Vector types: the common interface, sequential vectors and multivectors."""