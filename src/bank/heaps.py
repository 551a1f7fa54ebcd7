QUESTIONS = [
    {
        "id": "enhanced-heap-1",
        "question": "Kth Largest Element in Array - Find the kth largest element in an unsorted array.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Keep a min-heap of size k; its root is the kth largest. Quickselect gives O(n) on average.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Bounded min-heap. Time: O(n log k), Space: O(k)",
                "code": (
                    "import heapq\n\n"
                    "def find_kth_largest(nums, k):\n"
                    "    heap = nums[:k]\n"
                    "    heapq.heapify(heap)\n"
                    "    for num in nums[k:]:\n"
                    "        if num > heap[0]:\n"
                    "            heapq.heapreplace(heap, num)\n"
                    "    return heap[0]\n"
                ),
            },
        ],
        "sample_answer": "Min-heap of size k.",
        "tips": ["Quickselect worst case is O(n²)"],
        "tags": ["array", "heap", "quickselect", "sorting"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-heap-2",
        "question": "Top K Frequent Elements - Given integer array and integer k, return k most frequent elements.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Count frequencies with a hash map, then select the top k with a heap or bucket sort by frequency.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Counter plus heapq.nlargest. Time: O(n log k), Space: O(n)",
                "code": (
                    "import heapq\n"
                    "from collections import Counter\n\n"
                    "def top_k_frequent(nums, k):\n"
                    "    counts = Counter(nums)\n"
                    "    return heapq.nlargest(k, counts, key=counts.get)\n"
                ),
            },
        ],
        "sample_answer": "Count, then heap-select.",
        "tips": ["Bucket sort achieves O(n)"],
        "tags": ["array", "heap", "bucket-sort", "quickselect", "hash-table"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-heap-4",
        "question": "Find Median from Data Stream - Design data structure that supports adding integers and finding median.",
        "category": "technical",
        "difficulty": "hard",
        "type": "technical",
        "approach": "A max-heap holds the lower half and a min-heap the upper half; keep their sizes within one so the median is read from the roots.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Two heaps. add: O(log n), median: O(1)",
                "code": (
                    "import heapq\n\n"
                    "class MedianFinder:\n"
                    "    def __init__(self):\n"
                    "        self.low, self.high = [], []\n\n"
                    "    def add_num(self, num):\n"
                    "        heapq.heappush(self.low, -num)\n"
                    "        heapq.heappush(self.high, -heapq.heappop(self.low))\n"
                    "        if len(self.high) > len(self.low):\n"
                    "            heapq.heappush(self.low, -heapq.heappop(self.high))\n\n"
                    "    def find_median(self):\n"
                    "        if len(self.low) > len(self.high):\n"
                    "            return -self.low[0]\n"
                    "        return (-self.low[0] + self.high[0]) / 2\n"
                ),
            },
        ],
        "sample_answer": "Balance two heaps.",
        "tips": ["Python's heapq is a min-heap; negate for max-heap"],
        "tags": ["heap", "design", "data-stream"],
        "estimated_time": 30,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
