"""Search trees, a B-tree, heaps, graphs, a linked list, a queue, a stack and a trie."""