import logging
import sys

from LinkedQueue import Queue, q_free, q_insert_head, q_remove_head, q_size

DELIM = "&-=-&"


def print_section(name: str):
    print(f"{DELIM} {name}")


def print_queue(q: "Queue", label: str = ""):
    if label:
        print(f"{label}: ", end="")
    print(f"[{' '.join(q.to_list())}] size={q.size()}")


# ───────────────────────── tasks ─────────────────────────

def task1_insert_remove():
    print_section("start-task1")

    q = Queue()
    print_section("empty-queue")
    print(f"empty={q.is_empty()} size={q.size()}")

    print_section("insert_head_tail")
    q.insert_tail("banana")
    q.insert_head("apple")
    q.insert_tail("cherry")
    print_queue(q, "after-insert")

    print_section("insert-rejected")
    print("ok=" + str(q.insert_head("")))
    print("ok=" + str(q.insert_tail(None)))
    print_queue(q, "after-rejected")

    print_section("remove_head")
    ok, out = q.remove_head()
    print(f"ok={ok} removed={out if ok else 'N/A'}")
    ok, out = q.remove_head(bufsize=4)
    print(f"ok={ok} removed={out if ok else 'N/A'}")
    print_queue(q, "after-remove")

    print_section("remove-empty")
    q.clear()
    ok, out = q.remove_head()
    print(f"ok={ok} removed={out if ok else 'N/A'} size={q.size()}")

    print_section("absent-queue")
    print(f"insert={q_insert_head(None, 'x')} remove={q_remove_head(None)[0]} size={q_size(None)}")


def task2_reverse():
    print_section("start-task2")

    q = Queue()
    q.insert_head("a")
    q.insert_head("b")
    print_queue(q, "seed")

    print_section("reverse")
    q.reverse()
    print_queue(q, "after-reverse")
    print(f"front={q.front()} back={q.back()}")

    print_section("reverse-twice")
    for s in ("c", "d", "e"):
        q.insert_tail(s)
    print_queue(q, "before")
    q.reverse()
    q.reverse()
    print_queue(q, "after")
    q_free(q)


def task3_sort():
    print_section("start-task3")

    q = Queue()
    for s in ("banana", "apple", "cherry"):
        q.insert_tail(s)
    print_queue(q, "seed")

    print_section("sort")
    q.sort()
    print_queue(q, "after-sort")

    print_section("sort-case-insensitive")
    q.clear()
    for s in ("b", "A", "a", "B", "c"):
        q.insert_tail(s)
    q.sort()
    print_queue(q, "stable")

    print_section("sort-idempotent")
    q.sort()
    print_queue(q, "again")
    print(f"back={q.back()}")
    q_free(q)


TASKS = {
    "task1": task1_insert_remove,
    "task2": task2_reverse,
    "task3": task3_sort,
}


# ───────────────────────── entry ─────────────────────────

def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    if "-v" in args:
        args.remove("-v")
        logging.basicConfig(level=logging.DEBUG)
    which = args[0] if args else ""
    if which in TASKS:
        TASKS[which](); return 0
    if which:
        print(f"unknown task: {which}")
        return 2
    # default: run all
    for task in TASKS.values():
        task()
    return 0


if __name__ == "__main__":
    sys.exit(main())
