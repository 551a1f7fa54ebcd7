QUESTIONS = [
    {
        "id": "enhanced-graph-1",
        "question": "Number of Islands - Given a 2D grid map of '1's (land) and '0's (water), count the number of islands.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Scan the grid; every unvisited land cell starts a new island which is flooded with DFS or BFS. Union-Find is an alternative.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "DFS flood fill marking visited cells in place. Time: O(m*n), Space: O(m*n) worst case",
                "code": (
                    "def num_islands(grid):\n"
                    "    rows, cols = len(grid), len(grid[0])\n\n"
                    "    def sink(r, c):\n"
                    "        if 0 <= r < rows and 0 <= c < cols and grid[r][c] == '1':\n"
                    "            grid[r][c] = '0'\n"
                    "            for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):\n"
                    "                sink(r + dr, c + dc)\n\n"
                    "    count = 0\n"
                    "    for r in range(rows):\n"
                    "        for c in range(cols):\n"
                    "            if grid[r][c] == '1':\n"
                    "                sink(r, c)\n"
                    "                count += 1\n"
                    "    return count\n"
                ),
            },
        ],
        "sample_answer": "Flood fill each new island.",
        "tips": ["Ask whether mutating the grid is allowed"],
        "tags": ["graph", "dfs", "bfs", "matrix", "union-find"],
        "estimated_time": 25,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-graph-2",
        "question": "Course Schedule - Given numCourses and prerequisites array, return true if you can finish all courses.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "The courses can be finished iff the prerequisite graph is acyclic. Kahn's algorithm (BFS over in-degrees) processes every node exactly when there is no cycle.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Kahn's topological sort. Time: O(V + E), Space: O(V + E)",
                "code": (
                    "from collections import deque\n\n"
                    "def can_finish(num_courses, prerequisites):\n"
                    "    graph = [[] for _ in range(num_courses)]\n"
                    "    indegree = [0] * num_courses\n"
                    "    for course, pre in prerequisites:\n"
                    "        graph[pre].append(course)\n"
                    "        indegree[course] += 1\n"
                    "    queue = deque(i for i in range(num_courses) if indegree[i] == 0)\n"
                    "    done = 0\n"
                    "    while queue:\n"
                    "        node = queue.popleft()\n"
                    "        done += 1\n"
                    "        for nxt in graph[node]:\n"
                    "            indegree[nxt] -= 1\n"
                    "            if indegree[nxt] == 0:\n"
                    "                queue.append(nxt)\n"
                    "    return done == num_courses\n"
                ),
            },
        ],
        "sample_answer": "Detect a cycle with topological sort.",
        "tips": ["DFS with three colors also detects cycles"],
        "tags": ["graph", "dfs", "bfs", "topological-sort"],
        "estimated_time": 30,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-graph-6",
        "question": "Network Delay Time - Given a network of n nodes and times array representing signal travel times, find minimum time for signal to reach all nodes from node k.",
        "category": "technical",
        "difficulty": "medium",
        "type": "technical",
        "approach": "Single-source shortest paths with non-negative weights: Dijkstra with a min-heap. The answer is the largest shortest distance, or -1 if a node is unreachable.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "Dijkstra with heapq. Time: O(E log V), Space: O(V + E)",
                "code": (
                    "import heapq\n"
                    "from collections import defaultdict\n\n"
                    "def network_delay_time(times, n, k):\n"
                    "    graph = defaultdict(list)\n"
                    "    for u, v, w in times:\n"
                    "        graph[u].append((v, w))\n"
                    "    dist = {}\n"
                    "    heap = [(0, k)]\n"
                    "    while heap:\n"
                    "        d, node = heapq.heappop(heap)\n"
                    "        if node in dist:\n"
                    "            continue\n"
                    "        dist[node] = d\n"
                    "        for nxt, w in graph[node]:\n"
                    "            if nxt not in dist:\n"
                    "                heapq.heappush(heap, (d + w, nxt))\n"
                    "    return max(dist.values()) if len(dist) == n else -1\n"
                ),
            },
        ],
        "sample_answer": "Dijkstra, then take the maximum distance.",
        "tips": ["Skip stale heap entries"],
        "tags": ["graph", "dijkstra", "shortest-path", "heap"],
        "estimated_time": 35,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
    {
        "id": "enhanced-graph-7",
        "question": "Word Ladder - Given two words beginWord and endWord, and a dictionary wordList, return the length of shortest transformation sequence.",
        "category": "technical",
        "difficulty": "hard",
        "type": "technical",
        "approach": "BFS over words where edges connect words differing by one letter. Wildcard buckets (h*t) avoid comparing every pair.",
        "code_implementation": [
            {
                "language": "python",
                "approach": "optimal",
                "explanation": "BFS with wildcard buckets. Time: O(N * L²), Space: O(N * L)",
                "code": (
                    "from collections import defaultdict, deque\n\n"
                    "def ladder_length(begin, end, words):\n"
                    "    buckets = defaultdict(list)\n"
                    "    for w in words:\n"
                    "        for i in range(len(w)):\n"
                    "            buckets[w[:i] + '*' + w[i + 1:]].append(w)\n"
                    "    queue, seen = deque([(begin, 1)]), {begin}\n"
                    "    while queue:\n"
                    "        word, steps = queue.popleft()\n"
                    "        if word == end:\n"
                    "            return steps\n"
                    "        for i in range(len(word)):\n"
                    "            for nxt in buckets[word[:i] + '*' + word[i + 1:]]:\n"
                    "                if nxt not in seen:\n"
                    "                    seen.add(nxt)\n"
                    "                    queue.append((nxt, steps + 1))\n"
                    "    return 0\n"
                ),
            },
        ],
        "sample_answer": "Shortest path in an implicit graph via BFS.",
        "tips": ["Bidirectional BFS halves the search frontier"],
        "tags": ["graph", "bfs", "string"],
        "estimated_time": 35,
        "industry": ["tech"],
        "practice_count": 0,
        "success_rate": 0,
    },
]
