"""End-to-end scenarios: parse, run, render."""

from tick_predprey import Chronicle, Engine, Facing, Kind, World, parse_scenario, render, run


def simulate(text):
    scenario = parse_scenario(text)
    return render(run(scenario.world, scenario.steps))


# --- Reference scenarios ---

def test_no_steps_renders_initial_grid():
    assert simulate("3 3 0\n1 0\n0 0 0 0\n") == "1**\n***\n***\n"


def test_single_cell_predator_eats_prey():
    assert simulate("1 1 1\n1 1\n0 0 0 0\n0 0 0 0\n") == "-1\n"


def test_senior_predator_wins_shared_prey():
    world = World(1, 5)
    world.spawn(Kind.PREDATOR, 0, 0, Facing.EAST)
    world.spawn(Kind.PREDATOR, 0, 0, Facing.EAST)
    world.spawn(Kind.PREY, 0, 1, Facing.EAST)
    after = run(world, 1)
    assert after.prey == ()
    assert [(p.eid, p.food) for p in after.predators] == [(0, 1), (1, 0)]


def test_prey_lifetime():
    world = World(4, 4)
    world.spawn(Kind.PREY, 0, 0, Facing.NORTH, stability=0)
    engine = Engine()
    for _ in range(9):
        world = engine.step(world)
        original = next(p for p in world.prey if p.eid == 0)
        assert original.facing is Facing.NORTH
    assert original.age == 9

    world = engine.step(world)
    assert all(p.eid != 0 for p in world.prey)
    assert [(p.eid, p.age) for p in world.prey] == [(1, 5), (2, 0), (3, 0)]


# --- Properties over longer runs ---

def test_prey_breed_exactly_twice():
    chronicle = Chronicle()
    world = World(1, 1)
    world.spawn(Kind.PREY, 0, 0, 0)
    Engine(chronicle=chronicle).run(world, 12)
    births = [b for b in chronicle.births() if b.parent == 0]
    assert [e.tick for e in births] == [5, 10]


def test_identities_follow_creation_order():
    chronicle = Chronicle()
    scenario = parse_scenario(
        "5 5 30\n"
        "3 2\n"
        "0 0 1 2\n"
        "2 2 0 0\n"
        "4 1 3 1\n"
        "0 2 3 3\n"
        "3 3 2 4\n"
    )
    world = Engine(chronicle=chronicle).run(scenario.world, scenario.steps)
    children = [b.child for b in chronicle.births()]
    assert children == list(range(5, 5 + len(children)))
    assert world.next_id == 5 + len(children)


def test_invariants_hold_every_tick():
    scenario = parse_scenario(
        "4 6 40\n"
        "4 3\n"
        "0 0 1 2\n"
        "1 3 2 3\n"
        "3 5 0 1\n"
        "2 2 3 0\n"
        "0 0 2 4\n"
        "3 1 1 2\n"
        "1 4 0 0\n"
    )
    engine = Engine()
    previous = scenario.world

    def check(world, ctx):
        nonlocal previous
        before = {a.eid: a for a in previous.entities()}
        for animal in world.entities():
            assert 0 <= animal.row < world.rows
            assert 0 <= animal.col < world.cols
            assert animal.age < animal.rules.max_age
            if animal.eid in before:
                assert animal.age == before[animal.eid].age + 1
            else:
                assert animal.age == 0
        eids = [p.eid for p in world.predators]
        assert eids == sorted(eids)
        previous = world

    engine.on_tick(check)
    engine.run(scenario.world, scenario.steps)
    assert engine.clock.tick_number == 40
