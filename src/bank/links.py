# Ссылки на практику: id вопроса -> задача на LeetCode / GeeksforGeeks
PRACTICE_LINKS = {
    "enhanced-array-1": {
        "title": "Two Sum",
        "leetcode": "https://leetcode.com/problems/two-sum/",
        "geeksforgeeks": "https://practice.geeksforgeeks.org/problems/key-pair5616/1",
    },
    "enhanced-array-2": {
        "title": "Best Time to Buy and Sell Stock",
        "leetcode": "https://leetcode.com/problems/best-time-to-buy-and-sell-stock/",
    },
    "enhanced-array-5": {
        "title": "Maximum Subarray",
        "leetcode": "https://leetcode.com/problems/maximum-subarray/",
        "geeksforgeeks": "https://practice.geeksforgeeks.org/problems/kadanes-algorithm-1587115620/1",
    },
    "enhanced-array-12": {
        "title": "Trapping Rain Water",
        "leetcode": "https://leetcode.com/problems/trapping-rain-water/",
        "geeksforgeeks": "https://practice.geeksforgeeks.org/problems/trapping-rain-water-1587115621/1",
    },
    "enhanced-array-15": {
        "title": "Sliding Window Maximum",
        "leetcode": "https://leetcode.com/problems/sliding-window-maximum/",
    },
    "enhanced-string-1": {
        "title": "Valid Anagram",
        "leetcode": "https://leetcode.com/problems/valid-anagram/",
        "geeksforgeeks": "https://practice.geeksforgeeks.org/problems/anagram-1587115620/1",
    },
    "enhanced-string-2": {
        "title": "Valid Parentheses",
        "leetcode": "https://leetcode.com/problems/valid-parentheses/",
    },
    "enhanced-string-4": {
        "title": "Minimum Window Substring",
        "leetcode": "https://leetcode.com/problems/minimum-window-substring/",
    },
    "enhanced-string-6": {
        "title": "Longest Substring Without Repeating Characters",
        "leetcode": "https://leetcode.com/problems/longest-substring-without-repeating-characters/",
    },
    "enhanced-string-7": {
        "title": "Valid Palindrome",
        "leetcode": "https://leetcode.com/problems/valid-palindrome/",
    },
    "enhanced-linkedlist-1": {
        "title": "Reverse Linked List",
        "leetcode": "https://leetcode.com/problems/reverse-linked-list/",
        "geeksforgeeks": "https://practice.geeksforgeeks.org/problems/reverse-a-linked-list/1",
    },
    "enhanced-linkedlist-2": {
        "title": "Linked List Cycle",
        "leetcode": "https://leetcode.com/problems/linked-list-cycle/",
    },
    "enhanced-linkedlist-6": {
        "title": "Merge k Sorted Lists",
        "leetcode": "https://leetcode.com/problems/merge-k-sorted-lists/",
    },
    "enhanced-tree-1": {
        "title": "Invert Binary Tree",
        "leetcode": "https://leetcode.com/problems/invert-binary-tree/",
    },
    "enhanced-tree-4": {
        "title": "Validate Binary Search Tree",
        "leetcode": "https://leetcode.com/problems/validate-binary-search-tree/",
    },
    "enhanced-tree-6": {
        "title": "Binary Tree Level Order Traversal",
        "leetcode": "https://leetcode.com/problems/binary-tree-level-order-traversal/",
    },
    "enhanced-tree-10": {
        "title": "Binary Tree Maximum Path Sum",
        "leetcode": "https://leetcode.com/problems/binary-tree-maximum-path-sum/",
    },
    "enhanced-dp-1": {
        "title": "Climbing Stairs",
        "leetcode": "https://leetcode.com/problems/climbing-stairs/",
    },
    "enhanced-dp-5": {
        "title": "Edit Distance",
        "leetcode": "https://leetcode.com/problems/edit-distance/",
        "geeksforgeeks": "https://practice.geeksforgeeks.org/problems/edit-distance3702/1",
    },
    "enhanced-dp-6": {
        "title": "Coin Change",
        "leetcode": "https://leetcode.com/problems/coin-change/",
    },
    "enhanced-dp-7": {
        "title": "Longest Increasing Subsequence",
        "leetcode": "https://leetcode.com/problems/longest-increasing-subsequence/",
    },
    "enhanced-graph-1": {
        "title": "Number of Islands",
        "leetcode": "https://leetcode.com/problems/number-of-islands/",
    },
    "enhanced-graph-2": {
        "title": "Course Schedule",
        "leetcode": "https://leetcode.com/problems/course-schedule/",
    },
    "enhanced-graph-6": {
        "title": "Network Delay Time",
        "leetcode": "https://leetcode.com/problems/network-delay-time/",
    },
    "enhanced-graph-7": {
        "title": "Word Ladder",
        "leetcode": "https://leetcode.com/problems/word-ladder/",
    },
    "enhanced-search-1": {
        "title": "Binary Search",
        "leetcode": "https://leetcode.com/problems/binary-search/",
    },
    "enhanced-search-2": {
        "title": "Search in Rotated Sorted Array",
        "leetcode": "https://leetcode.com/problems/search-in-rotated-sorted-array/",
    },
    "enhanced-heap-1": {
        "title": "Kth Largest Element in an Array",
        "leetcode": "https://leetcode.com/problems/kth-largest-element-in-an-array/",
    },
    "enhanced-heap-2": {
        "title": "Top K Frequent Elements",
        "leetcode": "https://leetcode.com/problems/top-k-frequent-elements/",
    },
    "enhanced-heap-4": {
        "title": "Find Median from Data Stream",
        "leetcode": "https://leetcode.com/problems/find-median-from-data-stream/",
    },
    "enhanced-backtrack-1": {
        "title": "Generate Parentheses",
        "leetcode": "https://leetcode.com/problems/generate-parentheses/",
    },
    "enhanced-backtrack-2": {
        "title": "Permutations",
        "leetcode": "https://leetcode.com/problems/permutations/",
    },
    "enhanced-backtrack-4": {
        "title": "N-Queens",
        "leetcode": "https://leetcode.com/problems/n-queens/",
    },
    "enhanced-bit-1": {
        "title": "Single Number",
        "leetcode": "https://leetcode.com/problems/single-number/",
        "geeksforgeeks": "https://practice.geeksforgeeks.org/problems/finding-the-numbers0215/1",
    },
    "enhanced-bit-2": {
        "title": "Number of 1 Bits",
        "leetcode": "https://leetcode.com/problems/number-of-1-bits/",
        "geeksforgeeks": "https://practice.geeksforgeeks.org/problems/set-bits0143/1",
    },
    "enhanced-bit-5": {
        "title": "Power of Two",
        "leetcode": "https://leetcode.com/problems/power-of-two/",
        "geeksforgeeks": "https://practice.geeksforgeeks.org/problems/power-of-2-1587115620/1",
    },
    "enhanced-bit-6": {
        "title": "Missing Number",
        "leetcode": "https://leetcode.com/problems/missing-number/",
    },
    "enhanced-matrix-1": {
        "title": "Spiral Matrix",
        "leetcode": "https://leetcode.com/problems/spiral-matrix/",
    },
    "enhanced-matrix-2": {
        "title": "Word Search II",
        "leetcode": "https://leetcode.com/problems/word-search-ii/",
    },
}
