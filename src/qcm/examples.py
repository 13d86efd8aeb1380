"""
Built-in example quiz: Case Classes.

Each module shows a code sample whose expected values are blanked out as
res0, res1, ... with the answer key alongside. The content covers equality,
hashing, toString, accessors, copy, default and named parameters,
deconstruction and serializability.
"""
from qcm.model import Document, Module


def _s(text: str) -> str:
    """Quote a string solution the way it appears in source code."""
    return f'"{text}"'


def build_case_classes_document() -> Document:
    modules = []

    modules.append(Module(
        preparagraph=(
            "Case classes are regular classes which export their constructor "
            "parameters and which provide a recursive decomposition mechanism "
            "via pattern matching. Instances are compared by structure and "
            "not by reference."
        ),
        code=(
            "abstract class Term\n"
            "case class Var(name: String) extends Term\n"
            "case class Fun(arg: String, body: Term) extends Term\n"
            "case class App(f: Term, v: Term) extends Term\n"
            "\n"
            "val x1 = Var(\"x\")\n"
            "val x2 = Var(\"x\")\n"
            "val y1 = Var(\"y\")\n"
            "\n"
            "(x1 == x2) should be(res0)\n"
            "(x1 == y1) should be(res1)"
        ),
        solutions=("true", "false"),
        postparagraph="The compiler generates an equals method from the constructor parameters.",
    ))

    modules.append(Module(
        preparagraph=(
            "It only makes sense to define case classes if pattern matching "
            "is used to decompose data structures."
        ),
        code=(
            "def isIdentityFun(term: Term): Boolean = term match {\n"
            "  case Fun(x, Var(y)) if x == y => true\n"
            "  case _ => false\n"
            "}\n"
            "val id = Fun(\"x\", Var(\"x\"))\n"
            "val t = Fun(\"x\", Fun(\"y\", App(Var(\"x\"), Var(\"y\"))))\n"
            "\n"
            "isIdentityFun(id) should be(res0)\n"
            "isIdentityFun(t) should be(res1)"
        ),
        solutions=("true", "false"),
    ))

    modules.append(Module(
        preparagraph=(
            "Case classes can be created without the new keyword, and == "
            "compares their contents while eq compares references."
        ),
        code=(
            "case class Person(first: String, last: String)\n"
            "\n"
            "val p1 = new Person(\"Fred\", \"Jones\")\n"
            "val p2 = new Person(\"Shaggy\", \"Rogers\")\n"
            "val p3 = new Person(\"Fred\", \"Jones\")\n"
            "\n"
            "(p1 == p2) should be(res0)\n"
            "(p1 == p3) should be(res1)\n"
            "\n"
            "(p1 eq p2) should be(res2)\n"
            "(p1 eq p3) should be(res3)"
        ),
        solutions=("false", "true", "false", "false"),
        postparagraph="p1 and p3 are equal but they are not the same instance.",
    ))

    modules.append(Module(
        preparagraph="Case classes have an automatic hashCode method that works:",
        code=(
            "case class Person(first: String, last: String)\n"
            "\n"
            "val p1 = new Person(\"Fred\", \"Jones\")\n"
            "val p2 = new Person(\"Shaggy\", \"Rogers\")\n"
            "val p3 = new Person(\"Fred\", \"Jones\")\n"
            "\n"
            "(p1.hashCode == p2.hashCode) should be(res0)\n"
            "(p1.hashCode == p3.hashCode) should be(res1)"
        ),
        solutions=("false", "true"),
    ))

    modules.append(Module(
        preparagraph="Case classes have a convenient toString method defined:",
        code=(
            "case class Dog(name: String, breed: String)\n"
            "val d1 = Dog(\"Scooby\", \"Doberman\")\n"
            "d1.toString should be(res0)"
        ),
        solutions=(_s("Dog(Scooby,Doberman)"),),
    ))

    modules.append(Module(
        preparagraph="Case classes have automatic properties:",
        code=(
            "case class Dog(name: String, breed: String)\n"
            "\n"
            "val d1 = Dog(\"Scooby\", \"Doberman\")\n"
            "d1.name should be(res0)\n"
            "d1.breed should be(res1)"
        ),
        solutions=(_s("Scooby"), _s("Doberman")),
    ))

    modules.append(Module(
        preparagraph=(
            "Case class fields are immutable by default. Use copy to make a "
            "changed version of an instance:"
        ),
        code=(
            "case class Dog(name: String, breed: String)\n"
            "\n"
            "val d1 = Dog(\"Scooby\", \"Doberman\")\n"
            "val d2 = d1.copy(name = \"Scooby Doo\")\n"
            "\n"
            "d1.name should be(res0)\n"
            "d1.breed should be(res1)\n"
            "\n"
            "d2.name should be(res2)\n"
            "d2.breed should be(res3)"
        ),
        solutions=(_s("Scooby"), _s("Doberman"), _s("Scooby Doo"), _s("Doberman")),
        postparagraph="The original instance is left unchanged.",
    ))

    modules.append(Module(
        preparagraph="Case classes can have default and named parameters:",
        code=(
            "case class Person(first: String, last: String, age: Int = 0, ssn: String = \"\")\n"
            "val p1 = Person(\"Fred\", \"Jones\", 23, \"111-22-3333\")\n"
            "val p2 = Person(\"Samantha\", \"Jones\")\n"
            "val p3 = Person(last = \"Jones\", first = \"Fred\", ssn = \"111-22-3333\")\n"
            "val p4 = p3.copy(age = 23)\n"
            "\n"
            "p1.first should be(res0)\n"
            "p1.last should be(res1)\n"
            "p1.age should be(res2)\n"
            "p1.ssn should be(res3)\n"
            "\n"
            "p2.first should be(res4)\n"
            "p2.last should be(res5)\n"
            "p2.age should be(res6)\n"
            "p2.ssn should be(res7)\n"
            "\n"
            "p3.first should be(res8)\n"
            "p3.last should be(res9)\n"
            "p3.age should be(res10)\n"
            "p3.ssn should be(res11)\n"
            "\n"
            "(p1 == p4) should be(res12)"
        ),
        solutions=(
            _s("Fred"), _s("Jones"), "23", _s("111-22-3333"),
            _s("Samantha"), _s("Jones"), "0", _s(""),
            _s("Fred"), _s("Jones"), "0", _s("111-22-3333"),
            "true",
        ),
    ))

    modules.append(Module(
        preparagraph="Case classes can be disassembled to their constituent parts as a tuple:",
        code=(
            "case class Person(first: String, last: String, age: Int = 0, ssn: String = \"\")\n"
            "val p1 = Person(\"Fred\", \"Jones\", 23, \"111-22-3333\")\n"
            "\n"
            "val parts = Person.unapply(p1).get\n"
            "parts._1 should be(res0)\n"
            "parts._2 should be(res1)\n"
            "parts._3 should be(res2)\n"
            "parts._4 should be(res3)"
        ),
        solutions=(_s("Fred"), _s("Jones"), "23", _s("111-22-3333")),
    ))

    modules.append(Module(
        preparagraph="Case classes are Serializable:",
        code=(
            "case class PersonCC(firstName: String, lastName: String)\n"
            "val indy = PersonCC(\"Indiana\", \"Jones\")\n"
            "indy.isInstanceOf[Serializable] should be(res0)\n"
            "\n"
            "class Person(firstName: String, lastName: String)\n"
            "val junior = new Person(\"Indiana\", \"Jones\")\n"
            "junior.isInstanceOf[Serializable] should be(res1)"
        ),
        solutions=("true", "false"),
    ))

    return Document(title="Case Classes", modules=tuple(modules))
