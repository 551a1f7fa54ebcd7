QUESTIONS = [
    {
        "id": "enhanced-tree-1",
        "question": "Invert Binary Tree - Given the root of a binary tree, invert the tree and return its root.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "Swap the children of every node, either recursively (DFS) or level by level with a queue (BFS).",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Recursive swap. Time: O(n), Space: O(h)",
                "code": (
                    "def invert_tree(root):\n"
                    "    if root:\n"
                    "        root.left, root.right = invert_tree(root.right), invert_tree(root.left)\n"
                    "    return root\n"
                ),
            },
        ],
        "sample_answer": "Swap children at every node.",
        "tips": ["Mention the iterative BFS variant"],
        "tags": ["tree", "binary-tree", "recursion", "dfs", "bfs"],
        "estimated_time": 15,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-tree-4",
        "question": "Validate Binary Search Tree - Given the root of a binary tree, determine if it is a valid binary search tree.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Pass down the open interval (low, high) each node must fall into. An in-order traversal of a valid BST is strictly increasing.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "DFS with bounds. Time: O(n), Space: O(h)",
                "code": (
                    "def is_valid_bst(root, low=float('-inf'), high=float('inf')):\n"
                    "    if not root:\n"
                    "        return True\n"
                    "    if not low < root.val < high:\n"
                    "        return False\n"
                    "    return (is_valid_bst(root.left, low, root.val)\n"
                    "            and is_valid_bst(root.right, root.val, high))\n"
                ),
            },
        ],
        "sample_answer": "Propagate min/max bounds.",
        "tips": ["Checking only direct children is a classic bug"],
        "tags": ["tree", "binary-search-tree", "dfs", "recursion"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-tree-6",
        "question": "Binary Tree Level Order Traversal - Given the root of a binary tree, return the level order traversal of its nodes' values.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "BFS with a queue, draining exactly one level per iteration of the outer loop.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "BFS by levels. Time: O(n), Space: O(w)",
                "code": (
                    "from collections import deque\n\n"
                    "def level_order(root):\n"
                    "    if not root:\n"
                    "        return []\n"
                    "    result, queue = [], deque([root])\n"
                    "    while queue:\n"
                    "        level = []\n"
                    "        for _ in range(len(queue)):\n"
                    "            node = queue.popleft()\n"
                    "            level.append(node.val)\n"
                    "            queue.extend(c for c in (node.left, node.right) if c)\n"
                    "        result.append(level)\n"
                    "    return result\n"
                ),
            },
        ],
        "sample_answer": "Queue-based BFS.",
        "tips": ["Snapshot the queue length to separate levels"],
        "tags": ["tree", "binary-tree", "bfs", "queue"],
        "estimated_time": 20,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-tree-10",
        "question": "Binary Tree Maximum Path Sum - Given a binary tree, find the maximum path sum where path may start and end at any node.",
        "category": "technical",
        "difficulty": "hard",
        "type": "technical",
        "approach": "Post-order DFS returns the best downward path from each node while updating a global best that may bend through the node.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "DFS returning max gain. Time: O(n), Space: O(h)",
                "code": (
                    "def max_path_sum(root):\n"
                    "    best = float('-inf')\n\n"
                    "    def gain(node):\n"
                    "        nonlocal best\n"
                    "        if not node:\n"
                    "            return 0\n"
                    "        left = max(gain(node.left), 0)\n"
                    "        right = max(gain(node.right), 0)\n"
                    "        best = max(best, node.val + left + right)\n"
                    "        return node.val + max(left, right)\n\n"
                    "    gain(root)\n"
                    "    return best\n"
                ),
            },
        ],
        "sample_answer": "Track max gain per subtree.",
        "tips": ["Negative gains are dropped by clamping at 0"],
        "tags": ["tree", "binary-tree", "dfs", "recursion"],
        "estimated_time": 30,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
