"""Bit manipulation, Kadane's algorithm, Huffman coding, knapsack, sorting and text splitting."""