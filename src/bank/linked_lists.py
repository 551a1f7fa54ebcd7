QUESTIONS = [
    {
        "id": "enhanced-linkedlist-1",
        "question": "Reverse Linked List - Given the head of a singly linked list, reverse the list and return the reversed list.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "Walk the list once and point each node back at its predecessor. The recursive version reverses the tail first and fixes up the head.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Iterative pointer reversal. Time: O(n), Space: O(1)",
                "code": (
                    "def reverse_list(head):\n"
                    "    prev = None\n"
                    "    while head:\n"
                    "        head.next, prev, head = prev, head, head.next\n"
                    "    return prev\n"
                ),
            },
            {
                "language": "java",
                "approach": "moderate",
                "explanation": "Recursive reversal. Time: O(n), Space: O(n) call stack",
                "code": (
                    "public ListNode reverseList(ListNode head) {\n"
                    "    if (head == null || head.next == null) return head;\n"
                    "    ListNode rest = reverseList(head.next);\n"
                    "    head.next.next = head;\n"
                    "    head.next = null;\n"
                    "    return rest;\n"
                    "}\n"
                ),
            },
        ],
        "sample_answer": "Three pointers: prev, current, next.",
        "tips": ["Draw the pointers before coding", "Handle the empty list"],
        "tags": ["linked-list", "recursion", "two-pointers"],
        "estimated_time": 15,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-linkedlist-2",
        "question": "Linked List Cycle - Given head of a linked list, determine if the linked list has a cycle in it.",
        "category": "technical",
        "difficulty": "easy",
        "type": "technical",
        "approach": "Floyd's tortoise and hare: a fast pointer moving two steps meets a slow pointer only if there is a cycle. A hash set of visited nodes also works with O(n) space.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Fast and slow pointers. Time: O(n), Space: O(1)",
                "code": (
                    "def has_cycle(head):\n"
                    "    slow = fast = head\n"
                    "    while fast and fast.next:\n"
                    "        slow, fast = slow.next, fast.next.next\n"
                    "        if slow is fast:\n"
                    "            return True\n"
                    "    return False\n"
                ),
            },
        ],
        "sample_answer": "Floyd's cycle detection.",
        "tips": ["Compare node identity, not values"],
        "tags": ["linked-list", "two-pointers", "hash-table"],
        "estimated_time": 20,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-linkedlist-6",
        "question": "Merge k Sorted Lists - You are given an array of k linked-lists lists, each linked-list is sorted in ascending order. Merge all into one sorted linked-list.",
        "category": "technical",
        "difficulty": "hard",
        "type": "technical",
        "approach": "Keep the current head of every list in a min-heap and repeatedly pop the smallest. Pairwise divide and conquer merging has the same O(N log k) bound.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Min-heap of list heads. Time: O(N log k), Space: O(k)",
                "code": (
                    "import heapq\n\n"
                    "def merge_k_lists(lists):\n"
                    "    heap = [(node.val, i, node) for i, node in enumerate(lists) if node]\n"
                    "    heapq.heapify(heap)\n"
                    "    dummy = tail = ListNode()\n"
                    "    while heap:\n"
                    "        _, i, node = heapq.heappop(heap)\n"
                    "        tail.next = tail = node\n"
                    "        if node.next:\n"
                    "            heapq.heappush(heap, (node.next.val, i, node.next))\n"
                    "    return dummy.next\n"
                ),
            },
        ],
        "sample_answer": "Heap of heads, or pairwise merge.",
        "tips": ["Break ties in the heap with the list index"],
        "tags": ["linked-list", "divide-and-conquer", "heap", "merge-sort"],
        "estimated_time": 35,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
