"""Built-in reference set seeded into an empty catalog, in display order."""

from codekickstart.domain.catalog.entities.language import (
    BookResource,
    Concept,
    LanguageEntry,
    Resources,
    WebResource,
)


def _python() -> LanguageEntry:
    return LanguageEntry.create(
        slug="python",
        name="Python",
        icon="🐍",
        description=(
            "Python is a high-level, interpreted programming language known for its simple "
            "syntax and readability."
        ),
        purpose=(
            "Perfect for beginners, data science, web development, automation, and "
            "artificial intelligence."
        ),
        concepts=(
            Concept(
                title="Variables",
                description="Store data in named containers",
                example='name = "Alice"\nage = 25\nis_student = True',
            ),
            Concept(
                title="Functions",
                description="Reusable blocks of code",
                example=(
                    "def greet(name):\n"
                    '    return f"Hello, {name}!"\n'
                    "\n"
                    'message = greet("World")'
                ),
            ),
            Concept(
                title="Loops",
                description="Repeat code multiple times",
                example=(
                    "for i in range(5):\n"
                    '    print(f"Count: {i}")\n'
                    "\n"
                    "numbers = [1, 2, 3, 4, 5]\n"
                    "for num in numbers:\n"
                    "    print(num * 2)"
                ),
            ),
        ),
        resources=Resources(
            websites=(
                WebResource(
                    name="Python.org Tutorial",
                    url="https://docs.python.org/3/tutorial/",
                    description="Official Python tutorial for beginners",
                ),
                WebResource(
                    name="freeCodeCamp Python",
                    url="https://www.freecodecamp.org/learn/scientific-computing-with-python/",
                    description="Free interactive Python course",
                ),
                WebResource(
                    name="W3Schools Python",
                    url="https://www.w3schools.com/python/",
                    description="Comprehensive Python reference and tutorials",
                ),
            ),
            videos=(
                WebResource(
                    name="Python for Everybody",
                    url="https://www.youtube.com/watch?v=8DvywoWv6fI",
                    description="Complete Python course by freeCodeCamp",
                ),
                WebResource(
                    name="Corey Schafer Python Tutorials",
                    url="https://www.youtube.com/playlist?list=PL-osiE80TeTt2d9bfVyTiXJA-UTHn6WwU",
                    description="In-depth Python tutorials for beginners",
                ),
            ),
            books=(
                BookResource(
                    name="Automate the Boring Stuff with Python",
                    author="Al Sweigart",
                    description="Practical programming for total beginners (free online)",
                ),
                BookResource(
                    name="Python Crash Course",
                    author="Eric Matthes",
                    description="A hands-on, project-based introduction to programming",
                ),
            ),
        ),
    )


def _javascript() -> LanguageEntry:
    return LanguageEntry.create(
        slug="javascript",
        name="JavaScript",
        icon="⚡",
        description=(
            "JavaScript is the programming language of the web, enabling interactive "
            "websites and modern web applications."
        ),
        purpose=(
            "Essential for web development, both frontend and backend, mobile apps, and "
            "desktop applications."
        ),
        concepts=(
            Concept(
                title="Variables",
                description="Store and manipulate data",
                example='let name = "Alice";\nconst age = 25;\nvar isStudent = true;',
            ),
            Concept(
                title="Functions",
                description="Reusable code blocks",
                example=(
                    "function greet(name) {\n"
                    "    return `Hello, ${name}!`;\n"
                    "}\n"
                    "\n"
                    "const add = (a, b) => a + b;"
                ),
            ),
            Concept(
                title="Loops",
                description="Iterate through data",
                example=(
                    "for (let i = 0; i < 5; i++) {\n"
                    "    console.log(`Count: ${i}`);\n"
                    "}\n"
                    "\n"
                    "const numbers = [1, 2, 3, 4, 5];\n"
                    "numbers.forEach(num => console.log(num * 2));"
                ),
            ),
        ),
        resources=Resources(
            websites=(
                WebResource(
                    name="MDN Web Docs",
                    url="https://developer.mozilla.org/en-US/docs/Web/JavaScript",
                    description="Comprehensive JavaScript documentation and tutorials",
                ),
                WebResource(
                    name="freeCodeCamp JavaScript",
                    url="https://www.freecodecamp.org/learn/javascript-algorithms-and-data-structures/",  # noqa: E501
                    description="Interactive JavaScript course with projects",
                ),
                WebResource(
                    name="JavaScript.info",
                    url="https://javascript.info/",
                    description="Modern JavaScript tutorial from basics to advanced",
                ),
            ),
            videos=(
                WebResource(
                    name="JavaScript Full Course",
                    url="https://www.youtube.com/watch?v=PkZNo7MFNFg",
                    description="Complete JavaScript course by freeCodeCamp",
                ),
                WebResource(
                    name="The Net Ninja JavaScript",
                    url="https://www.youtube.com/playlist?list=PL4cUxeGkcC9i9Ae2D9Ee1RvylH38dKuET",
                    description="JavaScript tutorials for beginners",
                ),
            ),
            books=(
                BookResource(
                    name="Eloquent JavaScript",
                    author="Marijn Haverbeke",
                    description="A modern introduction to programming (free online)",
                ),
                BookResource(
                    name="You Don't Know JS",
                    author="Kyle Simpson",
                    description="Deep dive into JavaScript fundamentals (free online)",
                ),
            ),
        ),
    )


def _java() -> LanguageEntry:
    return LanguageEntry.create(
        slug="java",
        name="Java",
        icon="☕",
        description=(
            "Java is a robust, object-oriented programming language designed for "
            "portability and enterprise applications."
        ),
        purpose=(
            "Widely used for enterprise software, Android development, web backends, and "
            "large-scale applications."
        ),
        concepts=(
            Concept(
                title="Variables",
                description="Typed variables with explicit declarations",
                example=(
                    'String name = "Alice";\n'
                    "int age = 25;\n"
                    "boolean isStudent = true;\n"
                    "double gpa = 3.8;"
                ),
            ),
            Concept(
                title="Methods",
                description="Functions within classes",
                example=(
                    "public class HelloWorld {\n"
                    "    public static String greet(String name) {\n"
                    '        return "Hello, " + name + "!";\n'
                    "    }\n"
                    "    \n"
                    "    public static void main(String[] args) {\n"
                    '        System.out.println(greet("World"));\n'
                    "    }\n"
                    "}"
                ),
            ),
            Concept(
                title="Loops",
                description="Iterate with different loop types",
                example=(
                    "for (int i = 0; i < 5; i++) {\n"
                    '    System.out.println("Count: " + i);\n'
                    "}\n"
                    "\n"
                    "int[] numbers = {1, 2, 3, 4, 5};\n"
                    "for (int num : numbers) {\n"
                    "    System.out.println(num * 2);\n"
                    "}"
                ),
            ),
        ),
        resources=Resources(
            websites=(
                WebResource(
                    name="Oracle Java Tutorials",
                    url="https://docs.oracle.com/javase/tutorial/",
                    description="Official Java tutorials from Oracle",
                ),
                WebResource(
                    name="GeeksforGeeks Java",
                    url="https://www.geeksforgeeks.org/java/",
                    description="Comprehensive Java programming guide",
                ),
                WebResource(
                    name="W3Schools Java",
                    url="https://www.w3schools.com/java/",
                    description="Java tutorial with examples and exercises",
                ),
            ),
            videos=(
                WebResource(
                    name="Java Full Course",
                    url="https://www.youtube.com/watch?v=xk4_1vDrzzo",
                    description="Complete Java programming course",
                ),
                WebResource(
                    name="Derek Banas Java Tutorial",
                    url="https://www.youtube.com/watch?v=WPvGqX-TXP0",
                    description="Java tutorial in one video",
                ),
            ),
            books=(
                BookResource(
                    name="Head First Java",
                    author="Kathy Sierra & Bert Bates",
                    description="Beginner-friendly approach to learning Java",
                ),
                BookResource(
                    name="Java: The Complete Reference",
                    author="Herbert Schildt",
                    description="Comprehensive Java programming guide",
                ),
            ),
        ),
    )


def _cpp() -> LanguageEntry:
    return LanguageEntry.create(
        slug="cpp",
        name="C++",
        icon="⚙️",
        description=(
            "C++ is a powerful, low-level programming language that offers fine control "
            "over system resources."
        ),
        purpose=(
            "Used for system programming, game development, embedded systems, and "
            "performance-critical applications."
        ),
        concepts=(
            Concept(
                title="Variables",
                description="Strongly typed variables",
                example=(
                    "#include <iostream>\n"
                    "#include <string>\n"
                    "\n"
                    'std::string name = "Alice";\n'
                    "int age = 25;\n"
                    "bool isStudent = true;\n"
                    "double gpa = 3.8;"
                ),
            ),
            Concept(
                title="Functions",
                description="Function definitions and declarations",
                example=(
                    "#include <iostream>\n"
                    "#include <string>\n"
                    "\n"
                    "std::string greet(std::string name) {\n"
                    '    return "Hello, " + name + "!";\n'
                    "}\n"
                    "\n"
                    "int main() {\n"
                    '    std::cout << greet("World") << std::endl;\n'
                    "    return 0;\n"
                    "}"
                ),
            ),
            Concept(
                title="Loops",
                description="Different types of loops",
                example=(
                    "for (int i = 0; i < 5; i++) {\n"
                    '    std::cout << "Count: " << i << std::endl;\n'
                    "}\n"
                    "\n"
                    "int numbers[] = {1, 2, 3, 4, 5};\n"
                    "for (int num : numbers) {\n"
                    "    std::cout << num * 2 << std::endl;\n"
                    "}"
                ),
            ),
        ),
        resources=Resources(
            websites=(
                WebResource(
                    name="cplusplus.com",
                    url="https://www.cplusplus.com/doc/tutorial/",
                    description="Comprehensive C++ tutorial and reference",
                ),
                WebResource(
                    name="GeeksforGeeks C++",
                    url="https://www.geeksforgeeks.org/c-plus-plus/",
                    description="C++ programming tutorials and examples",
                ),
                WebResource(
                    name="W3Schools C++",
                    url="https://www.w3schools.com/cpp/",
                    description="C++ tutorial with interactive examples",
                ),
            ),
            videos=(
                WebResource(
                    name="C++ Full Course",
                    url="https://www.youtube.com/watch?v=vLnPwxZdW4Y",
                    description="Complete C++ programming course",
                ),
                WebResource(
                    name="The Cherno C++",
                    url="https://www.youtube.com/playlist?list=PLlrATfBNZ98dudnM48yfGUldqGD0S4FFb",
                    description="In-depth C++ series for beginners to advanced",
                ),
            ),
            books=(
                BookResource(
                    name="C++ Primer",
                    author="Stanley Lippman",
                    description="Comprehensive introduction to C++",
                ),
                BookResource(
                    name="Programming: Principles and Practice Using C++",
                    author="Bjarne Stroustrup",
                    description="C++ from the creator of the language",
                ),
            ),
        ),
    )


def _dart() -> LanguageEntry:
    return LanguageEntry.create(
        slug="dart",
        name="Dart",
        icon="🎯",
        description=(
            "Dart is a modern programming language optimized for building fast apps on any "
            "platform."
        ),
        purpose=(
            "Primarily used for Flutter mobile app development, but also for web and "
            "server-side development."
        ),
        concepts=(
            Concept(
                title="Variables",
                description="Type-safe variables with inference",
                example=(
                    'String name = "Alice";\n'
                    "int age = 25;\n"
                    "bool isStudent = true;\n"
                    "var gpa = 3.8; // Type inferred as double"
                ),
            ),
            Concept(
                title="Functions",
                description="Functions with optional parameters",
                example=(
                    'String greet(String name, [String greeting = "Hello"]) {\n'
                    "  return '$greeting, $name!';\n"
                    "}\n"
                    "\n"
                    "void main() {\n"
                    '  print(greet("World"));\n'
                    '  print(greet("Alice", "Hi"));\n'
                    "}"
                ),
            ),
            Concept(
                title="Loops",
                description="Modern loop constructs",
                example=(
                    "for (int i = 0; i < 5; i++) {\n"
                    "  print('Count: $i');\n"
                    "}\n"
                    "\n"
                    "List<int> numbers = [1, 2, 3, 4, 5];\n"
                    "for (int num in numbers) {\n"
                    "  print(num * 2);\n"
                    "}"
                ),
            ),
        ),
        resources=Resources(
            websites=(
                WebResource(
                    name="Dart.dev",
                    url="https://dart.dev/guides",
                    description="Official Dart documentation and tutorials",
                ),
                WebResource(
                    name="DartPad",
                    url="https://dartpad.dev/",
                    description="Online Dart editor and playground",
                ),
                WebResource(
                    name="Flutter Documentation",
                    url="https://flutter.dev/docs",
                    description="Learn Dart through Flutter development",
                ),
            ),
            videos=(
                WebResource(
                    name="Dart Programming Tutorial",
                    url="https://www.youtube.com/watch?v=Ej_Pcr4uC2Q",
                    description="Complete Dart programming course",
                ),
                WebResource(
                    name="Flutter & Dart Bootcamp",
                    url="https://www.youtube.com/watch?v=x0uinJvhNxI",
                    description="Learn Dart through Flutter development",
                ),
            ),
            books=(
                BookResource(
                    name="Learning Dart",
                    author="Ivo Balbaert",
                    description="Comprehensive guide to Dart programming",
                ),
                BookResource(
                    name="Flutter in Action",
                    author="Eric Windmill",
                    description="Learn Dart through Flutter app development",
                ),
            ),
        ),
    )


def _rust() -> LanguageEntry:
    return LanguageEntry.create(
        slug="rust",
        name="Rust",
        icon="🦀",
        description=(
            "Rust is a systems programming language focused on safety, speed, and concurrency."
        ),
        purpose=(
            "Used for system programming, web backends, blockchain, and performance-critical "
            "applications."
        ),
        concepts=(
            Concept(
                title="Variables",
                description="Immutable by default with ownership",
                example=(
                    'let name = "Alice"; // Immutable\n'
                    "let mut age = 25; // Mutable\n"
                    "let is_student: bool = true;\n"
                    "const MAX_SCORE: u32 = 100;"
                ),
            ),
            Concept(
                title="Functions",
                description="Functions with explicit return types",
                example=(
                    "fn greet(name: &str) -> String {\n"
                    '    format!("Hello, {}!", name)\n'
                    "}\n"
                    "\n"
                    "fn main() {\n"
                    '    let message = greet("World");\n'
                    '    println!("{}", message);\n'
                    "}"
                ),
            ),
            Concept(
                title="Loops",
                description="Safe iteration with ownership",
                example=(
                    "for i in 0..5 {\n"
                    '    println!("Count: {}", i);\n'
                    "}\n"
                    "\n"
                    "let numbers = vec![1, 2, 3, 4, 5];\n"
                    "for num in &numbers {\n"
                    '    println!("{}", num * 2);\n'
                    "}"
                ),
            ),
        ),
        resources=Resources(
            websites=(
                WebResource(
                    name="The Rust Book",
                    url="https://doc.rust-lang.org/book/",
                    description="Official Rust programming language book (free online)",
                ),
                WebResource(
                    name="Rust by Example",
                    url="https://doc.rust-lang.org/rust-by-example/",
                    description="Learn Rust through annotated examples",
                ),
                WebResource(
                    name="Rustlings",
                    url="https://github.com/rust-lang/rustlings",
                    description="Interactive Rust exercises for beginners",
                ),
            ),
            videos=(
                WebResource(
                    name="Rust Programming Course",
                    url="https://www.youtube.com/watch?v=zF34dRivLOw",
                    description="Complete Rust programming tutorial",
                ),
                WebResource(
                    name="Let's Get Rusty",
                    url="https://www.youtube.com/c/LetsGetRusty",
                    description="Rust tutorials and explanations",
                ),
            ),
            books=(
                BookResource(
                    name="Programming Rust",
                    author="Jim Blandy & Jason Orendorff",
                    description="Fast, safe systems development",
                ),
                BookResource(
                    name="Rust in Action",
                    author="Tim McNamara",
                    description="Systems programming concepts and techniques",
                ),
            ),
        ),
    )


def get_reference_languages() -> list[LanguageEntry]:
    """Return fresh, unpersisted entries for the built-in catalog."""
    return [_python(), _javascript(), _java(), _cpp(), _dart(), _rust()]


REFERENCE_SLUGS: tuple[str, ...] = ("python", "javascript", "java", "cpp", "dart", "rust")
