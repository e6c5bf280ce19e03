# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
hdsl generates a compact, type-checked builder API for HTML.

The element and attribute classification tables drive the generation pass (`hdsl.generate`),
which produces abstract accessor descriptions; `hdsl.emit` renders those as Python modules
whose accessors construct the nodes of `hdsl.nodes`.
'''
