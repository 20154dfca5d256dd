"""Static question sets, one ordered round of 15 per difficulty."""

from __future__ import annotations

from backend.models.question import QUESTIONS_PER_ROUND, Difficulty, Question

_EASY = (
    Question(
        "Which statement can also be used to jump out of a loop?",
        ("break", "next", "return", "stop"),
        "break",
    ),
    Question(
        "Which keyword is used to create an object?",
        ("new", "create", "object", "instance"),
        "new",
    ),
    Question(
        "Which of these is a relational database management system?",
        ("MySQL", "MongoDB", "Redis", "Cassandra"),
        "MySQL",
    ),
    Question(
        "Who developed the Python Programming Language?",
        ("Bill Gates", "Linus Torvalds", "Guido van Rossum", "Steve Jobs"),
        "Guido van Rossum",
    ),
    Question(
        'What does "URL" stand for?',
        (
            "Universal Resource Locator",
            "Uniform Resource Locator",
            "Unified Resource Locator",
            "Uniform Retrieval Link",
        ),
        "Uniform Resource Locator",
    ),
    Question(
        "What is the smallest unit of digital data?",
        ("Byte", "Bit", "Kilobyte", "Megabit"),
        "Bit",
    ),
    Question(
        'What is the output of "apple.length()"?',
        ("5", "4", "6", "e"),
        "5",
    ),
    Question(
        'What does "CPU" stand for?',
        (
            "Central Processing Unit",
            "Computer Power Unit",
            "Core Processing Unit",
            "Central Performance Unit",
        ),
        "Central Processing Unit",
    ),
    Question(
        "Which of these is an example of an operating system?",
        ("Microsoft Word", "Google Chrome", "Windows 11", "Adobe Photoshop"),
        "Windows 11",
    ),
    Question(
        "What is the correct way to write a comment in Python?",
        ("/* text */", "// text", "# text", "<!-- text -->"),
        "# text",
    ),
    Question(
        "What is the output of System.out.print(2 + 3 * 2)?",
        ("10", "8", "12", "7"),
        "8",
    ),
    Question(
        "Who is the father of computer?",
        ("Charles Babbage", "Alan Turing", "Joseph Marie Jacquard", "Herman Hollerith"),
        "Charles Babbage",
    ),
    Question(
        "Who made the Electronic Numerical Integrator And Computer (ENIAC)?",
        (
            "Alan Turing",
            "Konrad Zuse",
            "John Mauchly & J. Presper Eckert",
            "Bill Gates & Steve Jobs",
        ),
        "John Mauchly & J. Presper Eckert",
    ),
    Question(
        "What is the keyword for defining a class in Java?",
        ("function", "define", "class", "method"),
        "class",
    ),
    Question(
        "Which data type is used for whole numbers?",
        ("float", "String", "int", "boolean"),
        "int",
    ),
)

_NORMAL = (
    Question(
        "Which of these is a version control system?",
        ("Docker", "Kubernetes", "Git", "Jenkins"),
        "Git",
    ),
    Question(
        "What does API stand for?",
        (
            "Automated Programming Interface",
            "Application Programming Interface",
            "Advanced Protocol Integration",
            "Application Process Integration",
        ),
        "Application Programming Interface",
    ),
    Question(
        "Which of these is not a type of cyber attack?",
        ("Phishing", "Spoofing", "Defragmenting", "DDoS"),
        "Defragmenting",
    ),
    Question(
        "Which of these is a NoSQL database?",
        ("PostgreSQL", "MongoDB", "SQLite", "Oracle"),
        "MongoDB",
    ),
    Question(
        "Which command is used to check network connectivity in Windows?",
        ("ipconfig", "ping", "netstat", "tracert"),
        "ping",
    ),
    Question(
        "What does the super() keyword do in a Java constructor?",
        (
            "Call the parent class constructor",
            "Refer to the current object",
            "Create a new superclass instance",
            "Stops inheritance",
        ),
        "Call the parent class constructor",
    ),
    Question(
        "What is the output of this Java code?\n"
        'String s1 = new String("Hello");\n'
        'String s2 = "Hello";\n'
        "System.out.println(s1 == s2)",
        ("true", "false", "Error", "Hello"),
        "false",
    ),
    Question(
        "In Python, what is the purpose of __init__?",
        (
            "To initialize a class' attributes",
            "To terminate an object",
            "To import modules",
            "To handle errors",
        ),
        "To initialize a class' attributes",
    ),
    Question(
        'What does "CMS" stand for in web development?',
        (
            "Content Management System",
            "Computer Monitoring Service",
            "Centralized Media Storage",
            "Customer Management Software",
        ),
        "Content Management System",
    ),
    Question(
        "What is the primary purpose of polymorphism?",
        (
            "To restrict access",
            "To create multiple instances of a class",
            "To allow a method to operate on different data types",
            "To hasten code execution",
        ),
        "To allow a method to operate on different data types",
    ),
    Question(
        "What is the purpose of a cache in computing?",
        (
            "Long-term data storage",
            "Temporary storage for frequently accessed data",
            "Internet connection sharing",
            "Virus protection",
        ),
        "Temporary storage for frequently accessed data",
    ),
    Question(
        'What does the "this" keyword refer to in Java?',
        (
            "The current class object",
            "The parent class object",
            "The global object",
            "The method being executed",
        ),
        "The current class object",
    ),
    Question(
        "Which of these is a private IP address range?",
        ("192.168.1.1", "8.8.8.8", "172.217.0.0", "200.100.50.25"),
        "192.168.1.1",
    ),
    Question(
        "What is the purpose of try-catch blocks?",
        (
            "To handle exceptions",
            "To loop through code",
            "To define functions",
            "To optimize performance",
        ),
        "To handle exceptions",
    ),
    Question(
        "Which of these is not a common cloud computing provider?",
        ("AWS", "Azure", "Google Cloud", "Oracle"),
        "Oracle",
    ),
)

_HARD = (
    Question(
        "What is the time complexity of a binary search?",
        ("O(1)", "O(log n)", "O(n)", "O(n^2)"),
        "O(log n)",
    ),
    Question(
        "Which data structure uses LIFO (Last In First Out)?",
        ("Queue", "Stack", "Array", "LinkedList"),
        "Stack",
    ),
    Question(
        "What is the primary advantage of NVMe over SATA for SSDs?",
        (
            "Lower power consumption",
            "Higher maximum throughput",
            "Compatibility with older systems",
            "Larger storage capacity",
        ),
        "Higher maximum throughput",
    ),
    Question(
        'What is "Shannon\'s" entropy in information theory?',
        (
            "Measure of randomness in data",
            "Type of compression algorithm",
            "Network routing protocol",
            "Cryptographic key exchange method",
        ),
        "Measure of randomness in data",
    ),
    Question(
        "Which design pattern ensures only one instance of a class?",
        ("Singleton", "Factory", "Observer", "Builder"),
        "Singleton",
    ),
    Question(
        "What is garbage collection in programming?",
        (
            "Automatic memory management",
            "A cybersecurity technique",
            "A database optimization method",
            "A type of sorting algorithm",
        ),
        "Automatic memory management",
    ),
    Question(
        "Which of these is not a design pattern?",
        ("Singleton", "Observer", "Prototype", "Compiler"),
        "Compiler",
    ),
    Question(
        "Which of these is a homomorphic encryption technique?",
        (
            "Computing on encrypted data",
            "Symmetric encryption",
            "A VPN tunneling protocol",
            "A blockchain hashing method",
        ),
        "Computing on encrypted data",
    ),
    Question(
        'What causes "pipelining stalls" in CPUs?',
        ("Cache misses", "Branch mispredictions", "Disk I/O latency", "GPU Overheating"),
        "Branch mispredictions",
    ),
    Question(
        "What is the primary risk of manual memory management in C/C++ "
        "compared to garbage-collected languages?",
        ("Memory leaks", "Slower allocation", "Type errors", "Larger binaries"),
        "Memory leaks",
    ),
    Question(
        'What does a "blue screen" error typically indicate in Windows?',
        (
            "A kernel-level crash",
            "A virus infection",
            "Insufficient RAM",
            "Hard drive failure",
        ),
        "A kernel-level crash",
    ),
    Question(
        "Which scheduling algorithm can lead to starvation?",
        (
            "Round Robin",
            "Shortest Job First",
            "First Come First Serve",
            "Multilevel Feedback Queue",
        ),
        "Shortest Job First",
    ),
    Question(
        "Which technology enables decentralized digital ledgers?",
        ("Cloud Computing", "Blockchain", "Virtual Reality", "Quantum Computing"),
        "Blockchain",
    ),
    Question(
        "What sorting algorithm has the worst-case time complexity of O(n²)?",
        ("Merge Sort", "Quick Sort", "Bubble Sort", "Heap Sort"),
        "Bubble Sort",
    ),
    Question(
        "Why do GPUs excel at deep learning?",
        (
            "Massive parallelism for matrices",
            "Higher clock speeds",
            "More precise math",
            "Better branching",
        ),
        "Massive parallelism for matrices",
    ),
)

_ROUNDS: dict[Difficulty, tuple[Question, ...]] = {
    Difficulty.EASY: _EASY,
    Difficulty.NORMAL: _NORMAL,
    Difficulty.HARD: _HARD,
}

def _check_rounds(rounds: dict[Difficulty, tuple[Question, ...]]) -> None:
    for difficulty, questions in rounds.items():
        if len(questions) != QUESTIONS_PER_ROUND:
            raise ValueError(
                f"{difficulty.label} round has {len(questions)} questions, "
                f"expected {QUESTIONS_PER_ROUND}."
            )


_check_rounds(_ROUNDS)


class QuestionBank:
    """Read-only access to the question rounds — all methods are static."""

    @staticmethod
    def questions_for(difficulty: Difficulty) -> tuple[Question, ...]:
        return _ROUNDS[difficulty]

    @staticmethod
    def question_for(difficulty: Difficulty, index: int) -> Question:
        """Return question *index* (0-based); out-of-range raises ``IndexError``."""
        if not 0 <= index < QUESTIONS_PER_ROUND:
            raise IndexError(
                f"Question index {index} outside 0..{QUESTIONS_PER_ROUND - 1}."
            )
        return _ROUNDS[difficulty][index]

    @staticmethod
    def options_for(difficulty: Difficulty, index: int) -> tuple[str, ...]:
        return QuestionBank.question_for(difficulty, index).options

    @staticmethod
    def correct_answer_for(difficulty: Difficulty, index: int) -> str:
        return QuestionBank.question_for(difficulty, index).correct_answer
