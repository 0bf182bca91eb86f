from pongfire.collision import Collision, Contact, Side


def test_default_contact_is_no_collision():
    contact = Contact()
    assert contact.kind is Collision.NONE
    assert contact.penetration == 0.0
    assert contact.id == 0


def test_no_collision_is_falsy_value_zero():
    assert Collision(0) is Collision.NONE
    assert not Collision.NONE
    assert all(kind for kind in Collision if kind is not Collision.NONE)


def test_side_indexes_vertices_tuple():
    vertices = ("left", "right", "top", "bottom")
    assert len(Side) == 4
    assert [vertices[Side(index)] for index in range(4)] == list(vertices)


def test_contact_holds_given_values():
    contact = Contact(Collision.BOTTOM, 2.5, 7)
    assert (contact.kind, contact.penetration, contact.id) == (Collision.BOTTOM, 2.5, 7)