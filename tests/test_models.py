import unittest

from massaction.models import Reaction, Species


class TestSpecies(unittest.TestCase):
    def test_defaults_to_zero_concentration(self):
        species = Species("Ca")
        self.assertEqual(species.name, "Ca")
        self.assertEqual(species.concentration, 0.0)

    def test_accepts_negative_concentration(self):
        species = Species("X")
        species.concentration = -4.5
        self.assertEqual(species.concentration, -4.5)

    def test_same_name_is_not_same_species(self):
        self.assertNotEqual(Species("A"), Species("A"))


class TestReaction(unittest.TestCase):
    def setUp(self):
        self.a = Species("A", 2.0)
        self.b = Species("B", 3.0)
        self.c = Species("C", 5.0)
        self.d = Species("D", 7.0)

    def test_rate_is_product_of_reactant_concentrations(self):
        reaction = Reaction(4.0)
        for species in (self.a, self.b, self.c):
            reaction.add_reactant(species)
        reaction.add_product(self.d)
        self.assertEqual(reaction.rate(), 4.0 * 2.0 * 3.0 * 5.0)

    def test_rate_without_reactants_is_rate_constant(self):
        reaction = Reaction(0.25)
        reaction.add_product(self.a)
        self.assertEqual(reaction.rate(), 0.25)

    def test_duplicate_reactants_are_kept(self):
        # 2A -> D
        reaction = Reaction(1.5)
        reaction.add_reactant(self.a)
        reaction.add_reactant(self.a)
        reaction.add_product(self.d)
        self.assertEqual(reaction.reactants, [self.a, self.a])
        self.assertEqual(reaction.rate(), 1.5 * 2.0 * 2.0)

        net = {}
        for species, delta in reaction.contributions():
            net[species.name] = net.get(species.name, 0.0) + delta
        self.assertEqual(net, {"A": -12.0, "D": 6.0})

    def test_contributions_follow_entry_order(self):
        reaction = Reaction(1.0)
        reaction.add_reactant(self.a)
        reaction.add_reactant(self.b)
        reaction.add_product(self.c)
        rate = 2.0 * 3.0
        self.assertEqual(
            list(reaction.contributions()),
            [(self.a, -rate), (self.b, -rate), (self.c, rate)],
        )

    def test_rate_tracks_current_concentrations(self):
        reaction = Reaction(2.0)
        reaction.add_reactant(self.a)
        self.assertEqual(reaction.rate(), 4.0)
        self.a.concentration = 10.0
        self.assertEqual(reaction.rate(), 20.0)

    def test_negative_rate_constant_is_accepted(self):
        reaction = Reaction(-1.0)
        reaction.add_reactant(self.a)
        self.assertEqual(reaction.rate(), -2.0)


if __name__ == '__main__':
    unittest.main()
