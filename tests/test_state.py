from streamlit.testing.v1 import AppTest


def test_app_switches_views_and_keeps_edits():
    at = AppTest.from_file("../app.py")
    at.run()
    assert not at.exception
    at.number_input(key="pay_house_price").set_value(400000.0).run()
    at.radio(key="view_mode").set_value("Affordability").run()
    assert any(m.label == "Affordable House Price" for m in at.metric)
    at.radio(key="view_mode").set_value("Payment").run()
    assert at.number_input(key="pay_house_price").value == 400000.0
    assert at.number_input(key="pay_down_payment_amount").value == 80000.0


def test_reset_restores_defaults():
    at = AppTest.from_file("../app.py")
    at.run()
    at.number_input(key="pay_down_payment_percent").set_value(35.0).run()
    assert at.number_input(key="pay_down_payment_amount").value == 175000.0
    at.sidebar.button[0].click().run()
    assert at.number_input(key="pay_down_payment_percent").value == 20.0
    assert at.number_input(key="pay_down_payment_amount").value == 100000.0
